"""Move values.yaml of the kube-starrocks chart between the flat and the split layout.

Charts older than v1.8.0 keep every value at the top level. From v1.8.0 on the
values are split into an ``operator`` and a ``starrocks`` section.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Mapping
from typing import IO, Any

import yaml

NEW_VERSION = "v1.8.0"
OPERATOR = "operator"
STARROCKS = "starrocks"

STARROCKS_KEYS = (
    "nameOverride",
    "initPassword",
    "timeZone",
    "datadog",
    "starrocksCluster",
    "starrocksFESpec",
    "starrocksCnSpec",
    "starrocksBeSpec",
    "secrets",
    "configMaps",
    "feProxy",
)

OPERATOR_KEYS = ("global", "timeZone", "nameOverride", "starrocksOperator")

_DEFAULTS = {"timeZone": "Asia/Shanghai", "nameOverride": "kube-starrocks"}
_SHARED_KEYS = ("timeZone", "nameOverride")

logger = logging.getLogger(__name__)

_USAGE = """
This tool is used to upgrade or downgrade the version of values.yaml for kube-starrocks chart.

If the chart version is less than v1.8.0, the values.yaml is in the following format:
key1: value1
key2: value2

If the chart version is greater than or equal to v1.8.0, the values.yaml will be changed to the following format:
operator:
  key1: value1
starrocks:
  key2: value2

If you want to upgrade the version of values.yaml, you can run the following command:
./migrate-chart-value --input values.yaml --target-version v1.8.0 --output values_v1.8.0.yaml

If you want to downgrade the version of values.yaml, you can run the following command:
./migrate-chart-value --input values.yaml --target-version v1.7.1 --output values_v1.7.1.yaml
"""


class _Dumper(yaml.SafeDumper):
    """Safe dumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_Dumper.add_representer(str, _represent_str)


def _dump(obj: Any) -> str:
    return yaml.dump(
        obj,
        Dumper=_Dumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=True,
    )


def _load_mapping(text: str) -> dict:
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("values.yaml must hold a mapping at the top level")
    return data


def do(reader: IO, target_version: str, writer: IO[str]) -> None:
    """Read values.yaml from ``reader`` and write it in the layout of ``target_version``.

    Nothing is written when the input already has the layout the target expects.
    """
    content = reader.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    values = _load_mapping(content)

    operator = values.get(OPERATOR)
    starrocks = values.get(STARROCKS)
    if operator is not None or starrocks is not None:
        logger.info("this values.yaml is from new chart version >= %s", NEW_VERSION)
        if target_version >= NEW_VERSION:
            logger.info("no need to change to upgrade to %s", target_version)
            return
        if not isinstance(operator, dict):
            raise ValueError(f"the {OPERATOR!r} section must be a mapping")
        operator_fields = {k: v for k, v in operator.items() if k not in _SHARED_KEYS}
        writer.write(f"{_dump(operator_fields)}\n{_dump(starrocks)}")
        return

    logger.info("this values.yaml is from old chart version < %s,", NEW_VERSION)
    if target_version < NEW_VERSION:
        logger.info("no need to change to downgrade to %s", target_version)
        return
    write(writer, values, OPERATOR_KEYS, OPERATOR)
    writer.write("\n")
    write(writer, values, STARROCKS_KEYS, STARROCKS)


def write(
    writer: IO[str],
    original_fields: Mapping[str, Any],
    keys: Iterable[str],
    header: str,
) -> None:
    """Write the chosen ``keys`` of ``original_fields`` under ``header``.

    Missing or empty ``timeZone`` and ``nameOverride`` get their chart defaults.
    """
    fields: dict[str, Any] = {}
    for key in keys:
        value = original_fields.get(key)
        if value is None or (isinstance(value, str) and value == ""):
            value = _DEFAULTS.get(key)
        if value is not None:
            fields[key] = value

    if not fields:
        if header:
            writer.write(f"{header}:")
        return
    writer.write(add_header(fields, header))


def add_header(fields: Mapping[str, Any], header: str) -> str:
    """Render ``fields`` as YAML, nested under ``header`` when one is given."""
    output: Any = dict(fields)
    if header:
        output = {header: output}
    return _dump(output)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="migrate-chart-value",
        description=_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-input",
        "--input",
        dest="input",
        default="",
        help="the input path of values.yaml for kube-starrocks chart, "
        "if not specified, it will read from stdin",
    )
    parser.add_argument(
        "-target-version",
        "--target-version",
        dest="target_version",
        default="",
        help="the chart version, which this tool will change the values.yaml to",
    )
    parser.add_argument(
        "-output",
        "--output",
        dest="output",
        default="",
        help="the output path of values.yaml for kube-starrocks chart, "
        "if not specified, it will write to stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.INFO, format="%(asctime)s %(message)s")

    if not args.target_version:
        logger.info("target-version option is required")
        parser.print_help(sys.stderr)
        return 0
    if not args.target_version.startswith("v"):
        logger.info("version must start with v")
        parser.print_help(sys.stderr)
        return 0

    if args.input:
        with open(args.input, encoding="utf-8") as reader:
            content = reader.read()
    else:
        content = sys.stdin.read()

    source = _StringReader(content)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as writer:
            do(source, args.target_version, writer)
    else:
        do(source, args.target_version, sys.stdout)
    logger.info("success")
    return 0


class _StringReader:
    """Minimal reader over text already in memory."""

    def __init__(self, text: str) -> None:
        self._text = text

    def read(self) -> str:
        return self._text


if __name__ == "__main__":
    sys.exit(main())