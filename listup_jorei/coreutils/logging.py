import logging
import os
from datetime import datetime
from typing import Optional


def setup_logging(level=logging.INFO, log_dir: Optional[str] = None):
    """Setup basic logging configuration

    Logs always go to stderr. When ``log_dir`` is given, a dated file handler
    is added as well.
    """
    handlers = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(
                    log_dir, f"listup_jorei_{datetime.now().strftime('%Y-%m-%d')}.log"
                ),
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("listup_jorei")
