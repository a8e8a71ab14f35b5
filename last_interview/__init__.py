"""The Last Interview: narrative scoring and resolution engine for a job-interview simulator"""

__version__ = "0.1.0"
