# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Capability-specific facades over DifyClient.

Each facade holds a reference to one DifyClient and shapes the JSON
payloads of its endpoints:
- ChatClient: chat messages
- CompletionClient: completion messages
- WorkflowClient: workflow runs
- KnowledgeBaseClient: dataset creation
"""

from .chat import ChatClient
from .completion import CompletionClient
from .knowledge_base import KnowledgeBaseClient
from .workflow import WorkflowClient

__all__ = [
    "ChatClient",
    "CompletionClient",
    "KnowledgeBaseClient",
    "WorkflowClient",
]
