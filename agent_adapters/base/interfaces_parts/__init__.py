"""Interface parts package; import from `agent_adapters.base.interfaces` instead."""
