from cnfchart.config._config import Config
