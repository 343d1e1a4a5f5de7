"""
Plain text storage for the calorie log.

Each day with entries is stored on its own line as ``<Day>: <v1> <v2> ... <vn> ``
(space separated integers followed by a trailing space). Loading is tolerant:
malformed lines and tokens are skipped one by one so that as much valid data as
possible survives.
"""

import logging
from pathlib import Path

from calorie_ledger.domain.calories import CalorieLog, Day, parse_amount
from calorie_ledger.utils.exceptions import InvalidAmountError, InvalidDayError, StorageError
from calorie_ledger.utils.parameters import StorageConfig

logger = logging.getLogger(__name__)

LABEL_SEPARATOR = ": "
VALUE_SEPARATOR = " "


class CalorieFileStore:
    """
    Reads and writes a calorie log to a line oriented text file.

    The file is opened, fully read or written, and closed within each call.
    """

    def __init__(self, config: StorageConfig) -> None:
        """
        Initialize the file store.

        Args:
            config: Storage configuration (file path and encoding).
        """
        self.config = config
        self.path = Path(config.data_file)

    def serialize(self, log: CalorieLog) -> str:
        """
        Render a log in the text file format.

        Args:
            log: Calorie log to render.

        Returns:
            File contents, one line per day with entries, in week order.
        """
        lines = []
        for day in log.populated_days():
            values = "".join(f"{value}{VALUE_SEPARATOR}" for value in log.entries_for(day))
            lines.append(f"{day.value}{LABEL_SEPARATOR}{values}\n")
        return "".join(lines)

    def _parse_values(self, raw_values: str, line_number: int) -> list[int]:
        """
        Parse the value part of a line, skipping tokens that are not integers.

        Args:
            raw_values: Text after the label separator.
            line_number: Line number, for log messages.

        Returns:
            Integers found on the line, in order.
        """
        values: list[int] = []
        for token in raw_values.split(VALUE_SEPARATOR):
            if not token:
                continue
            try:
                values.append(parse_amount(token))
            except InvalidAmountError:
                logger.warning(f"Line {line_number}: skipping invalid entry {token!r}")
        return values

    def parse(self, text: str) -> CalorieLog:
        """
        Build a log from text file contents.

        Empty parts at the end of a split line are dropped, so
        ``Monday: 500: `` still reads as Monday with [500]. Lines that do not
        then split into exactly a label and a value list are skipped, as are
        lines whose label is not a day. A later line for the same day replaces
        an earlier one.

        Args:
            text: File contents.

        Returns:
            Parsed calorie log.
        """
        log = CalorieLog()

        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue

            parts = line.split(LABEL_SEPARATOR)
            while len(parts) > 1 and not parts[-1]:
                parts.pop()
            if len(parts) != 2:
                logger.debug(f"Line {line_number}: not a '<day>: <values>' record, skipping")
                continue

            label, raw_values = parts
            try:
                day = Day.from_label(label)
            except InvalidDayError:
                logger.warning(f"Line {line_number}: unknown day {label!r}, skipping")
                continue

            log.set_entries(day, self._parse_values(raw_values, line_number))

        return log

    def load(self) -> CalorieLog:
        """
        Load the calorie log from the data file.

        A missing file is the normal first-run state and yields an empty log.

        Returns:
            Loaded calorie log.

        Raises:
            StorageError: If the file exists but cannot be read.
        """
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, starting with an empty log")
            return CalorieLog()

        try:
            with open(self.path, encoding=self.config.encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read calorie data from {self.path}: {e}") from e

        log = self.parse(text)
        logger.info(f"Loaded {log.entry_count()} entries from {self.path}")
        return log

    def save(self, log: CalorieLog) -> Path:
        """
        Write the calorie log to the data file, replacing its contents.

        Args:
            log: Calorie log to persist.

        Returns:
            Path of the written file.

        Raises:
            StorageError: If the file cannot be written.
        """
        contents = self.serialize(log)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding=self.config.encoding) as f:
                f.write(contents)
        except OSError as e:
            raise StorageError(f"Failed to save calorie data to {self.path}: {e}") from e

        logger.info(f"Saved {log.entry_count()} entries to {self.path}")
        return self.path
