"""Template coordinates of the statement layouts at 300 DPI."""

from holdings.ocr.text_boxes import Point, Rect

# Shared header of both layouts.
ACCOUNT_NUMBER_RECT = Rect(83, 1360, 2352, 1419)

# Purchase layout.
CUSIP_POINT = Point(1700, 1111)
SHARE_POSITION_HEADER_RECT = Rect(96, 1701, 1742, 1777)
TRANSACTION_HEADER_RECT = Rect(84, 2043, 312, 2080)
TRANSACTION_LINE_OFFSET = 3

# DRS layout.
DRS_HEADER_RECT = Rect(84, 1632, 1105, 1688)
DRS_ACCOUNT_INFO_POINT = Point(300, 1960)
DRS_IMPORTANT_INFO_POINT = Point(300, 2630)

# Layout sniffing, checked in this order.
DRS_ANCHOR = DRS_HEADER_RECT
PURCHASE_ANCHOR = TRANSACTION_HEADER_RECT
