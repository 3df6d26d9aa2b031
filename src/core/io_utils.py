"""
YAML helpers for settings and practice config files.
"""
import os
import tempfile
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

logger = logging.getLogger(__name__)


def atomic_write_yaml(filepath: Path, data: Dict[str, Any]) -> None:
    """
    Save a mapping as YAML so readers see either the old or the new file.

    The data is serialized first, written to a hidden sibling file and moved
    over the target with os.replace().

    Raises:
        yaml.YAMLError: If data holds values YAML cannot represent
        IOError: If the file cannot be written
    """
    filepath = Path(filepath)
    text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

    temp_path = None
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=filepath.parent,
                prefix=f".{filepath.name}.",
                suffix=".tmp",
                delete=False
        ) as tmp:
            temp_path = Path(tmp.name)
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())

        os.replace(temp_path, filepath)

    except OSError as e:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        logger.error(f"Failed to write {filepath}: {e}")
        raise IOError(f"Atomic write failed: {e}") from e

    logger.debug(f"Saved {filepath}")


def load_yaml(filepath: Path) -> Any:
    """
    Read a YAML file.

    Returns:
        Parsed document; {} for an empty file

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is malformed
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        data = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.error(f"Malformed YAML in {filepath}: {e}")
        raise

    logger.debug(f"Read {filepath}")
    return {} if data is None else data
