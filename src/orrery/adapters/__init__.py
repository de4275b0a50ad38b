# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for system input and layout export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from orrery.adapters.json_io import (
    JsonLayoutWriter,
    JsonSystemReader,
    layout_to_dict,
    parse_body,
)
from orrery.adapters.csv_exporter import CsvLayoutExporter

__all__ = [
    "CsvLayoutExporter",
    "JsonLayoutWriter",
    "JsonSystemReader",
    "layout_to_dict",
    "parse_body",
]
