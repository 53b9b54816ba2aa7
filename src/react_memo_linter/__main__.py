"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import sys

from react_memo_linter.domain.exceptions import ConfigurationError
from react_memo_linter.infrastructure.di.container import ReactMemoContainer
from react_memo_linter.interface.cli import CLIDependencies, create_app
from react_memo_linter.interface.telemetry import LOGGER_NAME


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    # Telemetry already prints to the console.
    logging.getLogger(LOGGER_NAME).propagate = False
    try:
        container = ReactMemoContainer.get_instance()
    except ConfigurationError as exc:
        logging.getLogger("react_memo_linter").error("%s", exc)
        sys.exit(2)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        parser=container.get_parser_gateway(),
        filesystem=container.get_filesystem_gateway(),
        guidance_service=container.get_guidance_service(),
        text_reporter=container.get_text_reporter(),
        json_reporter=container.get_json_reporter(),
        console=container.get_console(),
    )

    app = create_app(deps)
    app()


if __name__ == "__main__":
    main()
