"""
logger.py

Logging module for huffcodec: tree construction, coding and merge progress records.
"""


from datetime import datetime
from typing import Dict, List, Optional, Union


class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class TreeConstructionLog(Log):
    def __init__(self, alphabet_size: int, root_weight: float, height: int) -> None:
        self.alphabet_size = alphabet_size
        self.root_weight = root_weight
        self.height = height
        super().__init__(
            "Tree_construction_log",
            LogLevel.INFO,
            f"Alphabet size: {alphabet_size}, Root weight: {root_weight}, Height: {height}",
        )


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded size: {encoded_size}")


class ProgressStep(Log):
    """A progress notification; the logger numbers the steps of each kind."""
    def __init__(self, type_name: str, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__(type_name, LogLevel.PROGRESS, message)


class MergeProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Merge_progress_step", message, total_steps)


class Logger:
    def __init__(self) -> None:
        self.progress_counts: Dict[type, int] = {}

        self.logs: List[Log] = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.merge_step_interval_count = 100

    def _step_interval(self, log: ProgressStep) -> int:
        if isinstance(log, MergeProgressStep):
            return self.merge_step_interval_count
        return 1

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            kind = type(log)
            count = self.progress_counts.get(kind, 0) + 1
            self.progress_counts[kind] = count
            if isinstance(log, ProgressStep):
                if log.total_steps is not None:
                    log.message = f"{log.base_message} ({count}/{log.total_steps})"
                else:
                    log.message = f"{log.base_message} ({count})"
                interval = self._step_interval(log)
            else:
                interval = 1
            if self.record_progress:
                self.logs.append(log)
            if self.display_progress and (count % interval == 0):
                print(log)

    def get_progress_count(self, kind: type) -> int:
        return self.progress_counts.get(kind, 0)

    def _should_save(self, log: Log) -> bool:
        if log.level == LogLevel.INFO:
            return self.save_info
        if log.level == LogLevel.WARNING:
            return self.save_warning
        if log.level == LogLevel.ERROR:
            return self.save_error
        return self.save_progress

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                if self._should_save(log):
                    file.write(str(log) + "\n")
