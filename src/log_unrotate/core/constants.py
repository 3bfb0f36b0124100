import re

# Rotated log filenames, e.g. output_log_24-03-07.txt
LOGFILE_NAME_PATTERN: re.Pattern[str] = re.compile(
    r"output_log_[0-9]{2}-[0-9]{2}-[0-9]{2}\.txt",
)

# Number of leading bytes inspected for the timestamp header
HEADER_SIZE: int = 30

# "2024.03.07 12:34:56 " at the start of any line of the header window
HEADER_DATE_PATTERN: re.Pattern[bytes] = re.compile(
    rb"(?m)^(?P<yyyy>\d{4})\.(?P<MM>\d{2})\.(?P<dd>\d{2}) \d{2}:\d{2}:\d{2} ",
)

DEFAULT_INTERVAL_SECONDS: float = 60.0
