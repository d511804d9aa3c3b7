"""Model parts package; import from `agent_adapters.base.models` instead."""
