"""Core data conversion logic."""

import csv
import datetime
import io
import json
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import jmespath
import toml
import yaml

from shared.logger import get_logger

from .highlight import Span, StyledSink, to_text
from .json_emitter import emit_json
from .model import ConversionFormat, JsonValue
from .toml_emitter import emit_toml
from .yaml_emitter import emit_yaml

logger = get_logger(__name__)


class InputFormat(str, Enum):
    """Supported input formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
    CSV = "csv"


SUFFIX_FORMATS = {
    ".json": InputFormat.JSON,
    ".yaml": InputFormat.YAML,
    ".yml": InputFormat.YAML,
    ".toml": InputFormat.TOML,
    ".csv": InputFormat.CSV,
}

EMITTERS: Dict[ConversionFormat, Callable[[Any], List[Span]]] = {
    ConversionFormat.JSON: emit_json,
    ConversionFormat.YAML: emit_yaml,
    ConversionFormat.TOML: emit_toml,
}


def _key_text(key: Any) -> str:
    # Same key coercion as json.dumps
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, bool):
        return json.dumps(key)
    if isinstance(key, (int, float)):
        return str(key)
    if isinstance(key, (datetime.date, datetime.time)):
        return key.isoformat()
    raise ValueError(f"Unsupported key type: {type(key).__name__}")


def to_value_model(data: Any) -> JsonValue:
    """
    Normalize parser output into the value model.

    Mapping keys become strings and date/time values become ISO-8601
    strings.

    Raises:
        ValueError: If the data holds a type with no JSON counterpart
    """
    if data is None or isinstance(data, (bool, int, float, str)):
        return data
    if isinstance(data, dict):
        return {_key_text(key): to_value_model(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_value_model(value) for value in data]
    if isinstance(data, (datetime.date, datetime.time)):
        return data.isoformat()
    raise ValueError(f"Unsupported value type: {type(data).__name__}")


def _csv_cell(cell: str) -> JsonValue:
    try:
        value = json.loads(cell)
    except ValueError:
        return cell
    # Keep the raw text for strings so quotes are not stripped
    return cell if isinstance(value, str) else value


def parse_csv(data: str) -> List[Dict[str, JsonValue]]:
    """
    Parse CSV text into a list of row objects.

    The first row holds the column names. Cells that decode as a non-string
    JSON value (numbers, booleans, null, arrays, objects) are decoded; all
    other cells are kept as text.
    """
    reader = csv.reader(io.StringIO(data))
    headers = next(reader, [])
    return [{header: _csv_cell(cell) for header, cell in zip(headers, row)} for row in reader]


class DataConverter:
    """
    Parse JSON, YAML, TOML and CSV documents and print them as JSON, YAML or TOML.

    Supports querying with JMESPath and terminal highlighting of the output.
    """

    def __init__(self):
        """Initialize data converter."""
        logger.debug("Initialized DataConverter")

    def load_file(self, filepath: Path, format: Optional[InputFormat] = None) -> JsonValue:
        """
        Load data from file.

        Args:
            filepath: Path to file
            format: Format to parse (auto-detect if None)

        Returns:
            Parsed data

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If format is unsupported or parsing fails
        """
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if format is None:
            format = SUFFIX_FORMATS.get(filepath.suffix.lower())
            if format is None:
                raise ValueError(f"Cannot auto-detect format for: {filepath}")

        logger.info(f"Loading {format.value} from {filepath}")

        content = filepath.read_text(encoding="utf-8")
        return self.parse(content, format)

    def parse(self, data: str, format: InputFormat) -> JsonValue:
        """
        Parse data string.

        Args:
            data: Data string
            format: Input format

        Returns:
            Parsed data

        Raises:
            ValueError: If parsing fails
        """
        try:
            if format == InputFormat.JSON:
                parsed = json.loads(data)
            elif format == InputFormat.YAML:
                parsed = yaml.safe_load(data)
            elif format == InputFormat.TOML:
                parsed = toml.loads(data)
            elif format == InputFormat.CSV:
                parsed = parse_csv(data)
            else:
                raise ValueError(f"Unsupported format: {format}")

            return to_value_model(parsed)

        except Exception as e:
            logger.error(f"Failed to parse {format.value}: {e}")
            raise ValueError(f"Failed to parse {format.value}: {e}")

    def query(self, data: JsonValue, query_str: str) -> JsonValue:
        """
        Query data using JMESPath.

        Args:
            data: Data to query
            query_str: JMESPath query string

        Returns:
            Query result

        Raises:
            ValueError: If query fails
        """
        try:
            return jmespath.search(query_str, data)

        except Exception as e:
            logger.error(f"Query failed: {e}")
            raise ValueError(f"Query failed: {e}")

    def emit(self, data: JsonValue, to_format: ConversionFormat) -> List[Span]:
        """
        Emit data as highlighted spans.

        Raises:
            UnsupportedValueError: If the data cannot be represented in the format
        """
        logger.debug(f"Emitting {to_format.value}")
        return EMITTERS[to_format](data)

    def convert(self, data: JsonValue, to_format: ConversionFormat) -> str:
        """
        Convert data to specified format.

        Args:
            data: Data to convert
            to_format: Target format

        Returns:
            Formatted string ending with a newline

        Raises:
            UnsupportedValueError: If the data cannot be represented in the format
        """
        return to_text(self.emit(data, to_format))

    def write(self, data: JsonValue, to_format: ConversionFormat, sink: StyledSink) -> None:
        """
        Write data to a sink in the specified format.

        The whole document is emitted before the first write, so nothing is
        written when the data cannot be represented.

        Args:
            data: Data to write
            to_format: Target format
            sink: Destination
        """
        spans = self.emit(data, to_format)
        sink.write_spans(spans)

    def convert_file(
        self,
        input_path: Path,
        output_path: Path,
        to_format: ConversionFormat,
        from_format: Optional[InputFormat] = None,
    ) -> None:
        """
        Convert file from one format to another.

        Args:
            input_path: Input file path
            output_path: Output file path
            to_format: Target format
            from_format: Source format (auto-detect if None)
        """
        data = self.load_file(input_path, format=from_format)

        output_data = self.convert(data, to_format)

        output_path.write_text(output_data, encoding="utf-8")

        logger.info(f"Converted {input_path} to {output_path}")
