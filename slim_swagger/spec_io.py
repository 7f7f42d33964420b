import datetime
import json
import os

import requests
import yaml

DEFAULT_OUTPUT_NAME = 'slim-swagger.json'
HTTP_TIMEOUT = 30


def is_url(locator):
    return locator.startswith(('http://', 'https://'))


def parse_openapi_spec(content, name=''):
    """
    Parse the text of an OpenAPI specification.

    Args:
        content (str): The document text
        name (str): File name or URL the text came from, used to pick the format

    Returns:
        dict: The parsed document
    """
    lowered = name.lower()
    if lowered.endswith('.json'):
        spec = json.loads(content)
    elif lowered.endswith(('.yaml', '.yml')):
        spec = yaml.safe_load(content)
    else:
        try:
            spec = json.loads(content)
        except json.JSONDecodeError:
            spec = yaml.safe_load(content)

    if not isinstance(spec, dict):
        raise ValueError(f"Not an OpenAPI document: {name or '<input>'}")
    return spec


def load_openapi_spec(locator):
    """Load an OpenAPI specification from a file path or an http(s) URL."""
    if is_url(locator):
        response = requests.get(locator, timeout=HTTP_TIMEOUT)
        response.raise_for_status()
        return parse_openapi_spec(response.text, locator.split('?', 1)[0])

    with open(locator, 'r', encoding='utf-8') as file:
        return parse_openapi_spec(file.read(), locator)


def read_list_file(path):
    """
    Read a newline separated list, one entry per line.

    Args:
        path (str): Path to the list file

    Returns:
        list: The stripped, non-empty lines in file order
    """
    with open(path, 'r', encoding='utf-8') as file:
        contents = file.read().strip()

    entries = [line.strip() for line in contents.splitlines()]
    entries = [entry for entry in entries if entry]
    if not entries:
        raise ValueError(f"Empty list file: {path}")
    return entries


def _json_default(value):
    # yaml.safe_load produces dates, datetimes and bytes JSON has no type for
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def render_json(spec):
    return json.dumps(spec, indent=2, ensure_ascii=False, default=_json_default)


def render_yaml(spec):
    return yaml.dump(spec, default_flow_style=False, sort_keys=False, allow_unicode=True)


def save_openapi_spec(spec, output_file):
    """
    Write a specification as JSON, or as YAML for .yaml/.yml output files.

    The document is rendered before the file is opened, so a rendering
    failure leaves no partial output behind.
    """
    if output_file.lower().endswith(('.yaml', '.yml')):
        content = render_yaml(spec)
    else:
        content = render_json(spec)

    with open(output_file, 'w', encoding='utf-8') as file:
        file.write(content)


def default_output_path(source, output=None):
    """
    Work out where the slimmed document goes.

    Without an explicit output the file lands next to the source (in the
    current directory for URL sources). An output naming a directory gets the
    default file name appended.
    """
    if not output:
        source_dir = '.' if is_url(source) else os.path.dirname(source) or '.'
        return os.path.join(source_dir, DEFAULT_OUTPUT_NAME)

    if output.endswith((os.sep, '/')) or os.path.isdir(output):
        return os.path.join(output, DEFAULT_OUTPUT_NAME)
    return output
