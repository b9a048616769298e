"""
Utility functions for PolluMap

Provides logging setup, JSON helpers, and the exception hierarchy
"""

import json
import logging
from pathlib import Path
from typing import Optional


# ═══════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging for PolluMap"""
    level = getattr(logging, log_level.upper())

    handlers = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module"""
    return logging.getLogger(name)


# ═══════════════════════════════════════════════════════════════════
# FILE I/O
# ═══════════════════════════════════════════════════════════════════

def read_json(file_path: str | Path) -> dict:
    """Read JSON file"""
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


# ═══════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════

class PolluMapError(Exception):
    """Base exception for PolluMap"""
    pass


class ConfigurationError(PolluMapError):
    """Agent catalog is inconsistent; the engine cannot be built"""
    pass


class InvalidInputError(PolluMapError, ValueError):
    """A user request was rejected; engine state is unchanged"""
    pass


class DataLoadError(PolluMapError):
    """Region data could not be loaded; the store keeps its previous contents"""
    pass
