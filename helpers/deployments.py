import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEPLOYMENTS_BASE_DIR = Path(__file__).resolve().parent.parent / "deployments"


def save_deployment(network_name, name, addresses, base_dir=DEPLOYMENTS_BASE_DIR):
    """
    Writes the deployed addresses to <base_dir>/<network_name>/<name>.json
    """
    path = Path(base_dir) / network_name / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({k: str(v) for k, v in addresses.items()}, indent=2, sort_keys=True))
    logger.info("Saved %s deployment to %s", name, path)
    return path
