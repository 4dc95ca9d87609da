"""Command-line front end.

Run via::

    xmlconform book.xml -s book.xsd                 # W3C XML Schema (default)
    xmlconform note.xml -s note.rng -l rng          # RELAX NG
    xmlconform -s book.xsd --schema-only            # check the schema itself

Exit status is 0 when everything is valid, 1 when problems were found and 2
when validation could not run (unreadable or invalid schema, malformed
instance, unsupported language).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from xmlconform import __version__
from xmlconform.language.base import Languages
from xmlconform.language.registry import UnsupportedSchemaLanguageError
from xmlconform.models.problems import ValidationResult
from xmlconform.settings import Settings
from xmlconform.source import Input
from xmlconform.validation.validator import (
    InvalidSchemaError,
    MalformedInstanceError,
    SchemaUnreadableError,
    Validator,
)

logger = logging.getLogger("xmlconform.cli")

_SHORT_NAMES: dict[str, str] = {
    "xsd": Languages.W3C_XML_SCHEMA_NS_URI,
    "dtd": Languages.XML_DTD_NS_URI,
    "rng": Languages.RELAXNG_NS_URI,
    "sch": Languages.SCHEMATRON_NS_URI,
}


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmlconform",
        description="Validate XML documents and report every schema problem",
    )
    parser.add_argument("instances", nargs="*", metavar="INSTANCE",
                        help="XML document(s) to validate")
    parser.add_argument("-s", "--schema", action="append", default=[], metavar="SCHEMA",
                        help="Schema file or URI (repeatable)")
    parser.add_argument("-l", "--language",
                        help="Schema language URI or one of: " + ", ".join(_SHORT_NAMES))
    parser.add_argument("--schema-only", action="store_true",
                        help="Check the schema sources instead of instances")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _report(label: str, result: ValidationResult) -> None:
    if result.valid:
        print(f"{label}: valid")
        return
    for line in result.summary_lines(label):
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI using settings from environment / .env file."""
    settings = Settings()
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    if args.schema_only and not args.schema:
        parser.error("--schema-only needs at least one --schema")
    if not args.schema_only and not args.instances:
        parser.error("at least one INSTANCE is required")

    logging.basicConfig(level=settings.log_level.upper())
    language = _SHORT_NAMES.get(args.language, args.language) or settings.default_language
    logger.info(
        "xmlconform v%s: %d schema source(s), language=%s",
        __version__, len(args.schema), language,
    )

    all_valid = True
    try:
        validator = Validator.for_language(language, schema_sources=args.schema, settings=settings)
        if args.schema_only:
            result = validator.validate_schema()
            _report("schema", result)
            all_valid = result.valid
        else:
            for path in args.instances:
                result = validator.validate_instance(Input.from_file(path))
                _report(path, result)
                all_valid = all_valid and result.valid
    except (
        UnsupportedSchemaLanguageError,
        SchemaUnreadableError,
        InvalidSchemaError,
        MalformedInstanceError,
        OSError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
