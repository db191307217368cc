from pathlib import Path

from screencopy.config.settings import Settings
from screencopy.export.exceptions import NoCompletedScreensError
from screencopy.logging.logger import Log
from screencopy.screens.ingestion import list_image_files
from screencopy.session.session import build_session


def main() -> None:
    """Entry point: ingest input images -> process -> retry failures -> export."""
    settings = Settings()
    Log.configure(settings.log_level)
    session = build_session(settings)

    try:
        session.add_files(list_image_files(Path(settings.input_dir)))
        session.process()
        for _ in range(settings.retry_failed_runs):
            if session.retry_failed() == 0:
                break

        stats = session.stats
        Log.info(
            f"Batch finished: {stats.success}/{stats.total} completed, {stats.error} failed"
        )
        try:
            session.export(settings.export_file_name)
        except NoCompletedScreensError as exc:
            Log.warning(str(exc))
    finally:
        session.close()


if __name__ == "__main__":
    main()
