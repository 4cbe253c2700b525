import json
import sys
from pathlib import Path

from finguru.validation.validator import RequestRejected, load_json, shape_for, validate_request


def _read_payload(source: str | None) -> object:
    if source is None or source == "-":
        return load_json(sys.stdin.read())

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Payload file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        return load_json(fh.read())


def main(shape_name: str, source: str | None = None) -> int:
    try:
        shape = shape_for(shape_name)
        data = _read_payload(source)
    except (KeyError, OSError, json.JSONDecodeError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) else str(exc)
        print(message, file=sys.stderr)
        return 2

    try:
        request = validate_request(shape, data)
    except RequestRejected as exc:
        for message in exc.messages:
            print(message, file=sys.stderr)
        return 1

    print(json.dumps(request.to_payload(), ensure_ascii=False, indent=2))
    return 0
