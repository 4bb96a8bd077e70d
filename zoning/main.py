"""Application entry point."""

import logging

from zoning.app.bootstrap import ZoningSession, build_zoning_session
from zoning.infra.app_data import ensure_app_data_dirs
from zoning.infra.config import load_default_env_files, load_zoning_config
from zoning.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> ZoningSession:
    """Build a configured zoning session."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.info("app_data_paths root=%s logs=%s", paths["root"], paths["logs"])
    config = load_zoning_config()
    session = build_zoning_session(config)
    areas_line, squares_line = session.summary().lines()
    logger.info(
        "zoning_session_ready",
        extra={
            "cell_size": config.cell_size,
            "coord_precision": config.coord_precision,
            "summary": f"{areas_line}; {squares_line}",
        },
    )
    return session


if __name__ == "__main__":
    main()
