"""Runtime defaults, overridable from the environment."""

import os


class Config:
    """Base configuration class."""

    # Multipart reassembly
    MULTIPART_TIMEOUT = float(os.environ.get('AIS_MULTIPART_TIMEOUT', 30.0))
    SWEEP_INTERVAL = float(os.environ.get('AIS_SWEEP_INTERVAL', 5.0))

    # Sentence emission
    DEFAULT_CHANNEL = os.environ.get('AIS_DEFAULT_CHANNEL', 'A')
    DEFAULT_TALKER = 'AIVDM'


config = Config
