import sys

from ghostprint.config.settings import Settings
from ghostprint.host.console_host import ConsoleHost
from ghostprint.logging.logger import Log
from ghostprint.pipeline.exceptions import UnexpectedError
from ghostprint.pipeline.orchestrator import build_orchestrator


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> orchestrator -> one print run."""
    argv = sys.argv if argv is None else argv
    host = ConsoleHost()
    try:
        settings = Settings()
        Log.configure(settings.log_level)
        orchestrator = build_orchestrator(settings, host=host)
    except Exception as exc:
        Log.error(f"Startup failed: {exc}")
        host.report(UnexpectedError.title, f"Invalid configuration: {exc}")
        host.terminate(UnexpectedError.exit_code)
        return UnexpectedError.exit_code

    raw_invocation = argv[1] if len(argv) > 1 else ""
    outcome = orchestrator.run(raw_invocation)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
