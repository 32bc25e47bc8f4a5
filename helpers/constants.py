ONE_DAY_IN_SECS = 24 * 60 * 60
ONE_YEAR_IN_SECS = 365 * ONE_DAY_IN_SECS
ONE_GWEI = 1_000_000_000
