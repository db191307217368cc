from dataclasses import dataclass
from enum import Enum


class ColumnHeader(str, Enum):
    REMARK = "Remark"
    SCREEN = "Screen"
    EN_DC = "EN copywriting (DC)"
    BM_DC = "BM copywriting (DC)"
    EN_PMM = "EN copywriting (PMM)"
    BM_PMM = "BM copywriting (PMM)"
    EN_TM = "EN copywriting (TM)"
    BM_TM = "BM copywriting (TM)"
    EN_OC = "EN copywriting (OC)"
    BM_OC = "BM copywriting (OC)"
    EN_CXM = "EN copywriting (CXM)"
    BM_CXM = "BM copywriting (CXM)"
    FINAL_EN = "Finalise copywriting (EN)"
    FINAL_BM = "Finalise copywriting (BM)"


@dataclass(frozen=True)
class ColumnSpec:
    header: ColumnHeader
    width: float


LABEL_COLUMN_WIDTH = 40

COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec(ColumnHeader.REMARK, 50),
    ColumnSpec(ColumnHeader.SCREEN, 60),
    *(
        ColumnSpec(header, LABEL_COLUMN_WIDTH)
        for header in ColumnHeader
        if header not in (ColumnHeader.REMARK, ColumnHeader.SCREEN)
    ),
)
