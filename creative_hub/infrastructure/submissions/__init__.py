# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logging_sink import LoggingSubmissionSink

__all__ = ["LoggingSubmissionSink"]
