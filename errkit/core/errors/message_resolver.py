"""Error message resolution.

Decides the human-readable text an error carries. A raw string is used as
is. A structured description runs an ordered waterfall where the first
step that produces text wins:

    1. Translation of the caller's key (only when a non-empty key was given)
    2. Caller-supplied fallback text
    3. Translation of the variant's default key
    4. The variant's built-in fallback text

Steps 1 and 3 are skipped when translation is disabled for the error or the
localization subsystem is unavailable. A lookup that finds nothing falls
through to the next step. Text chosen by steps 1-4 is then rendered through
the template engine; placeholders without data become the fallback marker.

Usage:
    from errkit.core.errors.message_resolver import resolve_message

    resolved = resolve_message(args, defaults, context)
    resolved.message, resolved.is_translated
"""

from dataclasses import dataclass

from errkit.core.constants import TEMPLATE_FALLBACK_MARKER
from errkit.core.enums import MessageSource
from errkit.core.errors.error_args import ErrorArgs
from errkit.core.errors.error_context import ErrorContext
from errkit.core.errors.error_keys import normalize_key
from errkit.core.errors.variant_defaults import VariantDefaults


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedMessage:
    """Outcome of message resolution.

    Attributes:
        message: Final, already-rendered text.
        source: Waterfall step that produced the text.
    """

    message: str
    source: MessageSource

    @property
    def is_translated(self) -> bool:
        """True when the text came from the translator."""
        return self.source.is_translated


def _translate(context: ErrorContext, key: str) -> str | None:
    translator = context.translator
    if translator is None:
        return None
    # empty catalog entries count as missing
    return translator.lookup(normalize_key(key)) or None


def _select(
    args: ErrorArgs, defaults: VariantDefaults, context: ErrorContext
) -> tuple[str, MessageSource]:
    translate = args.translate and context.localization_available

    if translate and args.key:
        message = _translate(context, args.key)
        if message is not None:
            return message, MessageSource.KEY_TRANSLATION

    if args.fallback:
        return args.fallback, MessageSource.FALLBACK

    if translate:
        message = _translate(context, defaults.key)
        if message is not None:
            return message, MessageSource.DEFAULT_KEY_TRANSLATION

    return defaults.fallback, MessageSource.DEFAULT_FALLBACK


def resolve_message(
    args: str | ErrorArgs, defaults: VariantDefaults, context: ErrorContext
) -> ResolvedMessage:
    """Resolve the final message for an error.

    Args:
        args: Raw message string or structured description.
        defaults: Defaults of the error's variant.
        context: Translator, template engine and logger to use.

    Returns:
        ResolvedMessage with the rendered text and its source.

    Example:
        >>> resolved = resolve_message(
        ...     ErrorArgs(key="custom", fallback="Custom failure", translate=False),
        ...     get_variant_defaults(ErrorVariant.GENERAL),
        ...     ErrorContext(template_engine=PlaceholderEngine()),
        ... )
        >>> resolved.message, resolved.is_translated
        ('Custom failure', False)
    """
    if isinstance(args, str):
        return ResolvedMessage(message=args, source=MessageSource.RAW)

    template, source = _select(args, defaults, context)
    data = args.data if args.data is not None else defaults.data
    message = context.template_engine.render(
        template, data, fallback=TEMPLATE_FALLBACK_MARKER
    )

    if context.logger is not None:
        context.logger.debug(
            "Error message resolved",
            error_key=normalize_key(args.key or defaults.key),
            source=source.value,
            localization_available=context.localization_available,
        )

    return ResolvedMessage(message=message, source=source)
