from __future__ import annotations

import logging
import sys

from bizdash.application.container import build_container
from bizdash.config import get_app_paths
from bizdash.domain.errors import ConfigError
from bizdash.logging_config import setup_logging
from bizdash.ui.app import App

log = logging.getLogger(__name__)


def main() -> None:
    paths = get_app_paths()
    setup_logging(paths.logs_dir, level=logging.INFO)

    try:
        container = build_container(paths.settings_path)
    except ConfigError as e:
        log.error("Configuration error: %s", e)
        print(f"Configuration error: {e}\nEdit {paths.settings_path} or set BIZDASH_ENDPOINT.", file=sys.stderr)
        raise SystemExit(2)

    app = App(
        api=container.api,
        auth_service=container.auth,
        currency_symbol=container.settings.currency_symbol,
        logs_dir=str(paths.logs_dir),
    )
    app.mainloop()


if __name__ == "__main__":
    main()
