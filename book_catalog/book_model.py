from dataclasses import dataclass
from enum import Enum


class BookFormat(str, Enum):
    """Format a book is published in."""

    KINDLE = 'KINDLE'
    AUDIOBOOK = 'AUDIOBOOK'
    PAPERBACK = 'PAPERBACK'
    HARDCOVER = 'HARDCOVER'


@dataclass(frozen=True)
class BookModel:
    """Book record."""

    id: int
    title: str
    author: str
    format: BookFormat
