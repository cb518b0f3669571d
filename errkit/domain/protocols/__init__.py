"""Domain protocols package.

Ports (structural interfaces) that infrastructure adapters implement.

Usage:
    from errkit.domain.protocols import TranslatorProtocol, TemplateEngineProtocol
"""

from errkit.domain.protocols.environment_protocol import EnvironmentProtocol
from errkit.domain.protocols.logger_protocol import LoggerProtocol
from errkit.domain.protocols.template_engine_protocol import TemplateEngineProtocol
from errkit.domain.protocols.translator_protocol import TranslatorProtocol

__all__ = [
    "EnvironmentProtocol",
    "LoggerProtocol",
    "TemplateEngineProtocol",
    "TranslatorProtocol",
]
