"""Tests for the Langfuse observability adapter with an injected callback handler."""

from marketlens.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler


class TestTraceConfig:
    def test_names_and_tags_each_call_by_symbol(self):
        handler = object()
        config = LangfuseObservabilityHandler(handler).trace_config("2330")

        assert config["callbacks"] == [handler]
        assert config["run_name"] == "market-narrative:2330"
        assert config["metadata"]["langfuse_tags"] == ["market-narrative", "2330"]

    def test_same_handler_is_reused(self):
        handler = object()
        adapter = LangfuseObservabilityHandler(handler)
        assert adapter.trace_config("BTC")["callbacks"][0] is adapter.trace_config("GC=F")["callbacks"][0]
