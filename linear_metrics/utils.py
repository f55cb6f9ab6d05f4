"""Utility functions for Linear Metrics."""

import os.path


def extend_dict(d, e):
    """Extend dictionary d with entries from e, returning a new dictionary."""
    r = d.copy()
    r.update(e)
    return r


def get_extension(filename):
    """Get file extension from filename."""
    return os.path.splitext(filename)[1].lower()


def write_frame(frame, output_file, sheet_name):
    """Write `frame` to `output_file` in the format implied by its extension.

    `.json` writes records, `.xlsx` an Excel sheet called `sheet_name`, and
    anything else CSV.
    """
    output_extension = get_extension(output_file)
    if output_extension == ".json":
        frame.to_json(output_file, orient="records", date_format="iso", indent=2)
    elif output_extension == ".xlsx":
        frame.to_excel(output_file, sheet_name=sheet_name, header=True, index=False)
    else:
        frame.to_csv(output_file, header=True, index=False, date_format="%Y-%m-%d %H:%M:%S")
