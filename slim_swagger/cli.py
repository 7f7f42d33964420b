import argparse
import sys

import requests
import yaml

from slim_swagger.operation_index import identifier_sort_key
from slim_swagger.selection_engine import FilterOutcome, SelectionEngine
from slim_swagger.spec_io import default_output_path, load_openapi_spec, read_list_file, save_openapi_spec

EPILOG = """
examples:
  list all available operationIds in a spec:
    slim-swagger -s ./my-swagger-spec.json --list

  keep only the operations named in a list file:
    slim-swagger -s https://petstore.swagger.io/v2/swagger.json -w ./operations-petstore.txt -o ./slim.json
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog='slim-swagger',
        description="Slim down an existing swagger/OpenAPI spec to a specific list of operations "
                    "and the models they use.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-s', '--source', required=True,
                        help="Path to the source spec to be slimmed (filesystem path or URL)")
    parser.add_argument('-w', '--whitelist',
                        help="File listing the allowed operationId values, one per line")
    parser.add_argument('-m', '--models',
                        help="File listing extra model names to keep (or to drop with --invert), one per line")
    parser.add_argument('-o', '--output',
                        help="Output file (default: source directory + 'slim-swagger.json'); "
                             "a .yaml/.yml name writes YAML")
    parser.add_argument('--invert', action='store_true',
                        help="Turn the operations and models lists into lists of values to remove")
    parser.add_argument('--list', action='store_true',
                        help="Print all operationId values of the source (default when no -w is given)")
    parser.add_argument('--list-all', action='store_true',
                        help="Print all operationId values followed by all model names")
    parser.add_argument('--tags', action='store_true',
                        help="Qualify listed operationIds with their tags ('tag.operationId')")
    parser.add_argument('--prune-tags', action='store_true',
                        help="Remove top-level tags no longer used by any remaining operation")
    return parser


def list_identifiers(engine, include_models=False, qualify_by_tag=False):
    for operation_id in engine.index.list_operation_ids(qualify_by_tag):
        print(operation_id)
    if include_models:
        for model_id in sorted(engine.registry.all_identifiers(), key=identifier_sort_key):
            print(model_id)


def slim(engine, args):
    operations = read_list_file(args.whitelist)
    models = read_list_file(args.models) if args.models else []

    outcome = engine.filter(operations, models, args.invert)
    if outcome is FilterOutcome.EMPTY_SELECTION:
        print("Empty operations list, nothing to slim")
        return 0

    if args.prune_tags:
        removed = engine.prune_tags()
        if removed:
            print(f"Removed {len(removed)} unused tags")

    output_file = default_output_path(args.source, args.output)
    save_openapi_spec(engine.document, output_file)
    print(engine.stats.report(output_file))
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        engine = SelectionEngine(load_openapi_spec(args.source))
        if args.list or args.list_all or not args.whitelist:
            list_identifiers(engine, include_models=args.list_all, qualify_by_tag=args.tags)
            return 0
        return slim(engine, args)
    except (OSError, ValueError, yaml.YAMLError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
