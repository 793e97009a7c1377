from __future__ import annotations

from typing import Literal, Union

from dto.base import Entity
from utils.coordinates import Dimension


class InternalHyperlink(Entity):
    """A jump to a range inside the workbook."""

    kind: Literal["internal"] = "internal"
    sheet_name: str
    cell_range: Dimension


class UrlHyperlink(Entity):
    kind: Literal["url"] = "url"
    url: str


class EmailHyperlink(Entity):
    kind: Literal["email"] = "email"
    mail_to: str
    subject: str = ""


Hyperlink = Union[InternalHyperlink, UrlHyperlink, EmailHyperlink]
