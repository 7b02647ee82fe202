import logging
from logging.config import dictConfig
from typing import Optional


LOG_FORMAT = "%(asctime)s\t[%(levelname)s]\t%(name)s\t%(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def buildLogConfig(logFile: Optional[str] = None, level: str = "INFO") -> dict:
	log_config = {
		"version": 1,
		"disable_existing_loggers": False,
		"formatters": {
			"default": {
				"format": LOG_FORMAT,
				"datefmt": LOG_DATEFMT,
			},
		},
		"handlers": {
			"console": {
				"class": "logging.StreamHandler",
				"level": "DEBUG",
				"formatter": "default",
				"stream": "ext://sys.stdout",
			},
		},
		"loggers": {
			"request": {"handlers": ["console"], "level": level, "propagate": False},
			"search": {"handlers": ["console"], "level": level, "propagate": False},
		},
		"root": {"handlers": ["console"], "level": level},
	}

	if logFile:
		log_config["handlers"]["file"] = {
			"class": "logging.FileHandler",
			"level": "INFO",
			"formatter": "default",
			"filename": logFile,
			"mode": "a"
		}
		log_config["root"]["handlers"] = ["file"]
		for loggerConfig in log_config["loggers"].values():
			loggerConfig["handlers"].append("file")

	return log_config


def configureLogging(logFile: Optional[str] = None, level: str = "INFO"):
	dictConfig(buildLogConfig(logFile, level))


searchLogger = logging.getLogger("search")

requestLogger = logging.getLogger("request")
