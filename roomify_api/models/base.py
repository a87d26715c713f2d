# File: roomify_api/models/base.py

from typing import Any

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    # project records are stored as JSON documents
    type_annotation_map = {
        dict[str, Any]: JSON,
    }
