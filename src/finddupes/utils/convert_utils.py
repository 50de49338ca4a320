"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        units = ["B", "KB", "MB", "GB", "TB", "PB"]
        for unit in units:
            if size_bytes < 1024:
                return f"{size_bytes:.2f}{unit}"
            size_bytes /= 1024
        return f"{size_bytes:.2f}EB"

    @staticmethod
    def bytes_to_megabytes(size_bytes: int) -> int:
        """Whole megabytes, rounded down."""
        return max(0, size_bytes) // 1024 // 1024

    @staticmethod
    def seconds_to_human(seconds: float) -> str:
        """
        Whole seconds below two minutes, minutes below two hours, hours beyond.
        """
        secs = int(max(0.0, seconds))
        if secs < 120:
            return f"{secs} seconds"
        if secs < 2 * 60 * 60:
            return f"{secs / 60.0:.2f} minutes"
        return f"{secs / 60.0 / 60.0:.2f} hours"
