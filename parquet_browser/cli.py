import argparse
import json
import logging
import sys

from .errors import ParquetBrowserError
from .reader import ParquetReader
from .source import DEFAULT_PARALLELISM

logger = logging.getLogger(__name__)


def _info(reader, args):
    return reader.file_info().to_dict()


def _rowgroups(reader, args):
    return [info.to_dict() for info in reader.all_row_groups_info()]


def _columns(reader, args):
    return [info.to_dict() for info in reader.all_column_chunks_info(args.row_group)]


def _pages(reader, args):
    return [page.to_dict() for page in reader.page_metadata_list(args.row_group, args.column)]


def _page(reader, args):
    return reader.page_metadata(args.row_group, args.column, args.page).to_dict()


def _content(reader, args):
    return reader.page_content_formatted(args.row_group, args.column, args.page)


def build_parser():
    parser = argparse.ArgumentParser(prog="parquet-browser")
    parser.add_argument("uri", help="local path or filesystem URI (s3://, gs://, hdfs://, ...)")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--parallelism", type=int, default=DEFAULT_PARALLELISM)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("info").set_defaults(handler=_info)
    commands.add_parser("rowgroups").set_defaults(handler=_rowgroups)

    columns = commands.add_parser("columns")
    columns.add_argument("row_group", type=int)
    columns.set_defaults(handler=_columns)

    for name, handler in (("pages", _pages), ("page", _page), ("content", _content)):
        command = commands.add_parser(name)
        command.add_argument("row_group", type=int)
        command.add_argument("column", type=int)
        if name != "pages":
            command.add_argument("page", type=int)
        command.set_defaults(handler=handler)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.getLevelNamesMapping()[args.log_level.upper()],
        format="%(asctime)s %(name)s [%(threadName)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        reader = ParquetReader.open(args.uri, parallelism=args.parallelism)
        result = args.handler(reader, args)
    except ParquetBrowserError as e:
        logger.error(f"{args.command} failed: {e}")
        print(json.dumps({"error": str(e)}, indent=2))
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
