import io
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.drawing.image import Image as SheetImage
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet
from PIL import Image

from screencopy.export import layout
from screencopy.export.base import BaseScreenExporter
from screencopy.export.columns import COLUMNS
from screencopy.export.exceptions import NoCompletedScreensError
from screencopy.logging.logger import Log
from screencopy.screens.models import Dimensions, ScreenRecord, ScreenStatus

SHEET_TITLE = "Copywriting Extraction"
DEFAULT_FILE_NAME = "copywriting_extraction"
HEADER_FILL = "FF144EB6"
HEADER_FONT_COLOR = "FFFFFFFF"
HEADER_HEIGHT = 40
IMAGE_COLUMN = 2

_EMBEDDABLE_FORMATS = frozenset({"PNG", "JPEG"})


class ExcelExporter(BaseScreenExporter):
    """Writes completed screens to an .xlsx workbook with embedded images."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def export(self, screens: Sequence[ScreenRecord], file_name: str) -> Path:
        workbook = self.build_workbook(screens)
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / f"{Path(file_name).name or DEFAULT_FILE_NAME}.xlsx"
        workbook.save(path)
        Log.info(f"Exported workbook to {path}")
        return path

    def build_workbook(self, screens: Sequence[ScreenRecord]) -> Workbook:
        """Build the workbook in memory: a header row plus one row per completed screen.

        Raises:
            NoCompletedScreensError: if no screen has completed.
        """
        completed = [s for s in screens if s.status is ScreenStatus.COMPLETED]
        if not completed:
            raise NoCompletedScreensError("No completed extractions to download.")

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = SHEET_TITLE
        self._write_header(worksheet)

        for row_number, screen in enumerate(completed, start=2):
            self._write_row(worksheet, row_number, screen)
        Log.info(f"Built workbook with {len(completed)} rows")
        return workbook

    @staticmethod
    def _write_header(worksheet: Worksheet) -> None:
        fill = PatternFill(fill_type="solid", fgColor=HEADER_FILL)
        font = Font(bold=True, color=HEADER_FONT_COLOR)
        alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
        for index, column in enumerate(COLUMNS, start=1):
            cell = worksheet.cell(row=1, column=index, value=column.header.value)
            cell.fill = fill
            cell.font = font
            cell.alignment = alignment
            worksheet.column_dimensions[get_column_letter(index)].width = column.width
        worksheet.row_dimensions[1].height = HEADER_HEIGHT

    def _write_row(self, worksheet: Worksheet, row_number: int, screen: ScreenRecord) -> None:
        remark = screen.structured_copy.remark if screen.structured_copy else ""
        cell = worksheet.cell(row=row_number, column=1, value=remark)
        cell.alignment = Alignment(vertical="top", wrap_text=True)

        dimensions = screen.dimensions or layout.DEFAULT_DIMENSIONS
        worksheet.row_dimensions[row_number].height = layout.row_height(dimensions)

        image_column = worksheet.column_dimensions[get_column_letter(IMAGE_COLUMN)]
        image_column.width = layout.image_column_width(dimensions, image_column.width)

        try:
            self._embed_image(worksheet, row_number, screen, dimensions)
        except Exception as exc:
            Log.error(
                f"Error adding image to workbook for screen {screen.id}: {exc}",
                file_name=screen.file_name,
            )

    @staticmethod
    def _embed_image(
        worksheet: Worksheet,
        row_number: int,
        screen: ScreenRecord,
        dimensions: Dimensions,
    ) -> None:
        sheet_image = SheetImage(_embeddable_stream(screen.source.path))
        sheet_image.width, sheet_image.height = layout.fitted_image_size(dimensions)
        worksheet.add_image(sheet_image, f"{get_column_letter(IMAGE_COLUMN)}{row_number}")


def _embeddable_stream(path: Path) -> io.BytesIO:
    """PNG and JPEG bytes pass through; anything else is transcoded to PNG."""
    data = path.read_bytes()
    with Image.open(io.BytesIO(data)) as image:
        if (image.format or "").upper() in _EMBEDDABLE_FORMATS:
            return io.BytesIO(data)
        buffer = io.BytesIO()
        image.convert("RGBA").save(buffer, format="PNG")
    buffer.seek(0)
    return buffer
