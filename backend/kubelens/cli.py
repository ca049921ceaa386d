import argparse
import json
import sys
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from kubelens.config import get_settings
from kubelens.core.logging import get_logger, setup_logging
from kubelens.exceptions import KubeLensError
from kubelens.schemas.base import KubeResource
from kubelens.services.k8s.client_factory import create_k8s_client
from kubelens.services.k8s.loader import describe, load_manifest_file
from kubelens.services.k8s.rbac_operations import list_resources
from kubelens.services.resources import RESOURCE_KINDS, convert_all, get_resource_class

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kubelens", description="Inspect Kubernetes RBAC resources")

    parser.add_argument(
        "kind",
        help="Resource kind: " + ", ".join(sorted({view.plural for view in RESOURCE_KINDS.values()})),
    )

    scope = parser.add_mutually_exclusive_group()
    scope.add_argument("-n", "--namespace", help="Namespace for namespaced kinds")
    scope.add_argument("-A", "--all-namespaces", action="store_true", help="List across all namespaces")

    parser.add_argument("-f", "--file", help="Read objects from a saved YAML/JSON manifest instead of the cluster")
    parser.add_argument(
        "-o",
        "--output",
        choices=["table", "yaml", "json"],
        default="table",
        help="Output format (table, yaml, json)",
    )
    return parser


def render_table(records: Sequence[KubeResource], headers: Sequence[str]) -> str:
    rows: List[List[str]] = [[h.upper() for h in headers]] + [record.row() for record in records]
    widths = [max(len(row[i]) for row in rows) for i in range(len(headers))]
    return "\n".join("   ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows)


def render(records: Sequence[KubeResource], resource_cls: type, output: str) -> str:
    if output == "yaml":
        return "---\n".join(describe(record) for record in records)
    if output == "json":
        return json.dumps([record.model_dump() for record in records], indent=2, ensure_ascii=False)
    return render_table(records, resource_cls.headers)


def run(args: argparse.Namespace) -> List[KubeResource]:
    resource_cls = get_resource_class(args.kind)

    if args.file:
        return convert_all(resource_cls, load_manifest_file(args.file, resource_cls))

    namespace = None if args.all_namespaces else (args.namespace or get_settings().default_namespace)
    with create_k8s_client() as api_client:
        return list_resources(api_client, resource_cls, namespace=namespace)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        records = run(args)
    except KubeLensError as exc:
        logger.debug("cli.failed", code=exc.code, details=exc.details)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    if records or args.output != "table":
        print(render(records, get_resource_class(args.kind), args.output))
    else:
        print("No resources found.", file=sys.stderr)
    return 0


def entrypoint() -> None:
    load_dotenv()
    setup_logging()
    raise SystemExit(main())
