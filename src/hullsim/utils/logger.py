import numpy as np
import pandas as pd
from pathlib import Path
from csv import writer
from shutil import copyfile
from os import remove
from os.path import exists
from collections.abc import Collection

from hullsim.events import EVENT_COLUMNS


class FilePrinter:
    """
    Handles writing rows to a csv file with buffering and safe-saving.
    It writes to a temporary file first and then replaces the original
    to prevent corruption during interruption.
    """
    def __init__(
            self,
            file_name: str,
            save_freq: int,
            header: Collection[str] = None,
            resume: bool = False,
            create_dir: bool = True
    ):
        if save_freq < 1:
            raise ValueError(f"'save_freq' should be greater than or equal to 1. Got: {save_freq}")
        self.file_name = file_name
        self.temp_file_path = '-temp.'.join(self.file_name.rsplit('.', 1))
        self.save_freq = save_freq
        self.call_count = 0
        self.buffer = None

        if not resume or not exists(self.file_name):
            self._create_file(header, create_dir)

    def __call__(self, rows):
        """
        Adds rows to the buffer and writes them out if the save frequency is met.
        Rows are kept as python objects so text and numbers survive as written.
        """
        self.call_count += 1
        rows = np.array(rows, dtype=object).reshape(-1, len(rows[0])) if len(rows) else None
        if rows is not None:
            if self.buffer is None:
                self.buffer = rows
            else:
                self.buffer = np.concatenate((self.buffer, rows), axis=0)

        if self.call_count % self.save_freq == 0:
            self.flush()

    def flush(self):
        """
        Writes any buffered rows to the file.
        """
        if self.buffer is not None:
            print('\rWriting logs to disk... Do not interrupt.', end='')
            self._copy_and_replace()
            print('\r' + ' ' * 50, end='\r')
            self.buffer = None

    def _print(self):
        with open(self.temp_file_path, 'a', newline='') as f:
            writer(f).writerows(self.buffer.tolist())

    def _copy_and_replace(self):
        """
        Copies the main file to a temp file, appends, and copies back.
        """
        try:
            if exists(self.file_name):
                copyfile(self.file_name, self.temp_file_path)
            self._print()
            copyfile(self.temp_file_path, self.file_name)
        finally:
            if exists(self.temp_file_path):
                remove(self.temp_file_path)

    def _create_file(self, header: Collection[str], create_dir: bool):
        p = Path(self.file_name)
        if create_dir:
            p.parent.mkdir(parents=True, exist_ok=True)

        with open(self.file_name, 'w', newline='') as f:
            if header is not None:
                writer(f).writerow(header)


class EventLogger:
    """
    Writes the construction events of a hull computation, and the hull itself,
    to csv files so a run can be replayed without recomputing it.
    """
    def __init__(
            self,
            file_prefix: str,
            save_freq: int,
            resume: bool = False,
    ):
        events_file = f"{file_prefix}-events.csv"
        # a resumed log continues the frame numbering of the existing file
        self.frame_count = _next_frame(events_file) if resume else 0
        self.events_printer = FilePrinter(
            file_name=events_file,
            save_freq=save_freq,
            header=EVENT_COLUMNS,
            resume=resume,
            create_dir=True,
        )
        self.hull_printer = FilePrinter(
            file_name=f"{file_prefix}-hull.csv",
            save_freq=1,  # only written once, at the end
            header=["x", "y"],
            resume=False,  # always overwrite final results
        )

    def log_frame(self, frame):
        """
        Logs one frame of events, numbering it after the frames already logged.
        """
        rows = [(self.frame_count,) + event.as_row() for event in frame]
        self.events_printer(rows)
        self.frame_count += 1

    def log_frames(self, frames):
        for frame in frames:
            self.log_frame(frame)

    def finalize(self, hull):
        """
        Writes the hull vertices and flushes all log files.
        """
        self.hull_printer([(p.x, p.y) for p in hull])
        self.events_printer.flush()
        self.hull_printer.flush()


# private helper functions

def _next_frame(events_file):
    if not exists(events_file):
        return 0
    frames = pd.read_csv(events_file, usecols=["frame"])["frame"]
    return int(frames.max()) + 1 if len(frames) else 0
