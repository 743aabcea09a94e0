# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for the schema_coercion package."""

import logging
import os
import sys
from dataclasses import dataclass

PACKAGE_LOGGER = "schema_coercion"


@dataclass
class LoggingConfig:
    """Configuration for the package logger."""
    log_level: str = "WARNING"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_COERCION_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('SCHEMA_COERCION_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Route the package logger to the console.

        Records below ``print_level`` go to stdout, the rest to stderr.
        Handlers already attached to the package logger are replaced.
        """
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = max(getattr(logging, self.print_level.upper(), logging.ERROR), logging.DEBUG)
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')

        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.handlers.clear()
        logger.setLevel(level)

        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.addFilter(lambda record: record.levelno < stderr_level)
        stderr_handler = logging.StreamHandler(stream=sys.stderr)
        stderr_handler.setLevel(stderr_level)

        for handler in (stdout_handler, stderr_handler):
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        return logger
