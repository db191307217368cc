"""Row and image sizing for the exported worksheet.

Row heights are in points, image sizes in pixels and column widths in
character units. One pixel is taken as 0.75pt and one character unit as 7px.
"""

from screencopy.screens.models import Dimensions

POINTS_PER_PIXEL = 0.75
PIXELS_PER_CHARACTER = 7
MAX_ROW_HEIGHT_POINTS = 409
MIN_ROW_HEIGHT_POINTS = 60
MAX_IMAGE_COLUMN_WIDTH = 100
DEFAULT_DIMENSIONS = Dimensions(width=400, height=400)


def row_height(dimensions: Dimensions) -> float:
    height = min(dimensions.height * POINTS_PER_PIXEL, MAX_ROW_HEIGHT_POINTS)
    return max(height, MIN_ROW_HEIGHT_POINTS)


def image_column_width(dimensions: Dimensions, current_width: float) -> float:
    """Widen the image column for a wide image, never past the cap, never narrower."""
    required = dimensions.width / PIXELS_PER_CHARACTER
    if required > current_width:
        return min(required, MAX_IMAGE_COLUMN_WIDTH)
    return current_width


def fitted_image_size(dimensions: Dimensions) -> tuple[int, int]:
    """Scale an image down to the row height cap, keeping aspect ratio.

    Images that already fit keep their size; nothing is scaled up.
    """
    height_points = dimensions.height * POINTS_PER_PIXEL
    if height_points <= MAX_ROW_HEIGHT_POINTS:
        return dimensions.width, dimensions.height
    ratio = MAX_ROW_HEIGHT_POINTS / height_points
    return round(dimensions.width * ratio), round(dimensions.height * ratio)
