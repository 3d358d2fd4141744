"""Structured output in JSON, key/value, table and custom formats."""

import json
import re
from dataclasses import dataclass, field
from typing import Any

_DECIMAL = re.compile(r"^-?(?:\d{1,3}(?:,\d{3})*|\d+)(?:\.\d+)?$")

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _dump_json(value: Any, pretty: bool, sort_keys: bool = False) -> str:
    if pretty:
        text = json.dumps(value, indent=2, ensure_ascii=False, sort_keys=sort_keys)
    else:
        text = json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, sort_keys=sort_keys
        )
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text


@dataclass
class OutputWriter:
    """Collects rows of labelled values and prints them in various formats.

    Start each row with start_line(), fill it with append_data(), then call
    one of the write_* methods.
    """

    keys: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    values: list[list[str]] = field(default_factory=list)
    temp_values: list[str] = field(default_factory=list)

    @classmethod
    def from_map(cls, data: dict[str, str]) -> "OutputWriter":
        """Build a writer holding *data* as its single row."""
        writer = cls()
        writer.start_line()
        for key, value in data.items():
            writer.append_data(key, value)
        return writer

    def to_json(self, value: Any, pretty: bool) -> None:
        """Print any JSON-serialisable value."""
        print(_dump_json(value, pretty))

    def start_line(self) -> None:
        """Finish the current row and begin a new one."""
        self._finish_existing_line()
        self.temp_values = [""] * len(self.keys)

    def _finish_existing_line(self) -> None:
        if self.temp_values:
            self.values.append(self.temp_values)
            self.temp_values = []

    def append_data_with_label(self, key: str, value: str, label: str) -> None:
        """Set *key* to *value* in the current row, shown under *label*."""
        if key in self.keys:
            index = len(self.keys) - 1 - self.keys[::-1].index(key)
            while len(self.temp_values) <= index:
                self.temp_values.append("")
            self.temp_values[index] = value
        else:
            self.keys.append(key)
            self.labels.append(label)
            self.temp_values.append(value)

    def append_data(self, key: str, value: str) -> None:
        """Set *key* to *value* in the current row, labelled by the key."""
        self.append_data_with_label(key, value, key)

    def _cell(self, row: list[str], column: int) -> str:
        return row[column] if column < len(row) else ""

    def _row_dict(self, row: list[str]) -> dict[str, str]:
        result: dict[str, str] = {}
        for column, key in enumerate(self.keys):
            value = self._cell(row, column)
            if value != "":
                result[key] = value
        return result

    def write_single_object_json(self, pretty: bool) -> None:
        """Print the first row as a JSON object, omitting empty values."""
        self._finish_existing_line()
        if not self.values:
            raise ValueError("no data to write")
        print(_dump_json(self._row_dict(self.values[0]), pretty, sort_keys=True))

    def write_multiple_objects_json(self, pretty: bool) -> None:
        """Print every row as a JSON array of objects, omitting empty values."""
        self._finish_existing_line()
        data = [self._row_dict(row) for row in self.values]
        print(_dump_json(data, pretty, sort_keys=True))

    def write_key_values(self) -> None:
        """Print the first row as right-aligned 'label : value' lines."""
        self._finish_existing_line()
        if not self.keys:
            return
        if not self.values:
            raise ValueError("no data to write")
        width = max((len(label.encode("utf-8")) for label in self.labels), default=0)
        first = self.values[0]
        for column, label in enumerate(self.labels):
            print(f"{label:>{width}} : {self._cell(first, column)}")

    def write_table(self) -> None:
        """Print all rows as a bordered table with a header."""
        self._finish_existing_line()
        if not self.keys:
            return

        columns = len(self.keys)
        rows = [[self._cell(row, c) for c in range(columns)] for row in self.values]
        widths = [
            max(
                [len(line) for line in self.labels[c].split("\n")]
                + [len(line) for row in rows for line in row[c].split("\n")]
            )
            for c in range(columns)
        ]
        separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

        def render(cells: list[str], header: bool) -> list[str]:
            split = [cell.split("\n") for cell in cells]
            height = max(len(lines) for lines in split)
            lines_out = []
            for index in range(height):
                parts = []
                for c, lines in enumerate(split):
                    text = lines[index] if index < len(lines) else ""
                    if not header and _DECIMAL.match(text.strip()):
                        parts.append(text.rjust(widths[c]))
                    else:
                        parts.append(text.ljust(widths[c]))
                lines_out.append("| " + " | ".join(parts) + " |")
            return lines_out

        output = [separator, *render(self.labels, True), separator]
        for row in rows:
            output.extend(render(row, False))
        output.append(separator)
        print("\n".join(output))

    def write_custom_output(self, fields: str) -> None:
        """Print each row by substituting key names in *fields* with values.

        Literal '\\t' and '\\n' sequences in *fields* become tab and newline.
        """
        self._finish_existing_line()
        columns = {
            key: [self._cell(row, column) for row in self.values]
            for column, key in enumerate(self.keys)
        }
        by_length = sorted(self.keys, key=len, reverse=True)

        for row_index in range(len(self.values)):
            output = fields
            for index, name in enumerate(by_length):
                if name and name in output:
                    output = output.replace(name, f"${index}$", 1)
            for index, name in enumerate(by_length):
                placeholder = f"${index}$"
                if placeholder in output:
                    output = output.replace(placeholder, columns[name][row_index], 1)
            output = output.replace("\\t", "\t").replace("\\n", "\n")
            print(output)

    def write_subheader(self, label: str) -> None:
        """Print *label* centred between runs of dashes."""
        count = int((72 - len(label) + 2) / 2)
        dashes = "-" * max(count, 0)
        print(f"{dashes} {label} {dashes}")

    def write_header(self, label: str) -> None:
        """Print *label* followed by a colon."""
        print(f"{label}:")