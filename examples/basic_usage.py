"""Basic single-file read example.

This example shows the simplest usage pattern: open a file, read its
headers, and iterate over its records. The library detects the format
from the extension or, failing that, from the file content.
"""

from pathlib import Path

from readervzrd import FileReader


# Write a small sample so the example runs anywhere
sample = Path("people.csv")
sample.write_text("Name,Age,Country\nJohn,30,USA\nAlice,25,UK\n")

# Option 1: Context manager (recommended)
# The file handle is released when the block ends
with FileReader(sample) as reader:
    print(f"Format: {reader.file_format}")
    print(f"Headers: {reader.headers()}")
    for record in reader.records():
        print(record)

# Option 2: Explicit delimiter for semicolon-separated data
# The hint only matters for CSV files; JSON and Parquet ignore it
semicolons = Path("people_semicolon.csv")
semicolons.write_text("Name;Age\nJohn;30\n")
reader = FileReader(semicolons, delimiter=";")

# headers() and records() can be called in any order, any number of times
records = list(reader.records())
headers = reader.headers()
print(dict(zip(headers, records[0], strict=True)))
reader.close()
