from .ejudge_formatter import EjudgeFormatter
from .json_formatter import JsonFormatter

FORMATS = ("ejudge", "json")


def get_formatter(output_format: str, options: dict = None):
    if output_format == "ejudge":
        return EjudgeFormatter(options)
    elif output_format == "json":
        return JsonFormatter(options)
    else:
        raise ValueError(f"Unsupported format: {output_format}")
