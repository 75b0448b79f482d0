from cnfchart.logging._logger import Logger
