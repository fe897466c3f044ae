"""
Infrastructure adapter: Amazon Bedrock (ChatBedrock) -> ILanguageModel.

All ChatBedrock / langchain_aws details are confined here. The model id and
region come from NARRATIVE_MODEL_ID and AWS_DEFAULT_REGION.
"""

import os
from typing import Any, Optional

from langchain_aws import ChatBedrock

from marketlens.domain.ports.llm_port import ILanguageModel


class BedrockChatAdapter(ILanguageModel):
    """Wraps ChatBedrock and exposes the ILanguageModel interface."""

    DEFAULT_MODEL_ID = "us.amazon.nova-pro-v1:0"

    def __init__(self, model_id: Optional[str] = None, temperature: float = 0.2) -> None:
        self._llm = ChatBedrock(
            model=model_id or os.environ.get("NARRATIVE_MODEL_ID", self.DEFAULT_MODEL_ID),
            model_kwargs={"temperature": temperature},
            region_name=os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def invoke(self, messages: list[Any], config: Optional[dict] = None) -> Any:
        return self._llm.invoke(messages, config=config)
