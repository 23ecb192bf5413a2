"""Vulture whitelist: methods called by frameworks, not direct code."""

# Protocol members: implemented by hosts, called through the protocol
from commentor.analyzer.symbols import Symbol
from commentor.codefix.patcher import NodeResolver

Symbol.existing_documentation
NodeResolver.find_node

# Pydantic validators/serializers: called by Pydantic, not our code
from commentor.analyzer.diagnostics import Finding

Finding.freeze_properties
Finding.serialize_properties

# Pydantic settings fields: read from the environment
from commentor.settings import Settings

Settings.model_config

# Add more as vulture reports false positives
