"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps raise sites short while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def parse_remainder(remainder: str) -> Diagnostic:
        """Parser stopped before consuming the whole message.

        Args:
            remainder: The unparsed tail of the message

        Returns:
            Diagnostic for PARSE_REMAINDER
        """
        msg = f"Couldn't parse message. Error detected at {remainder!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_REMAINDER,
            message=msg,
            hint="Check for unbalanced braces or a malformed argument near this text",
        )

    @staticmethod
    def parse_failed(reason: str) -> Diagnostic:
        """Parser reported an explicit failure.

        Args:
            reason: Parser diagnostic

        Returns:
            Diagnostic for PARSE_FAILED
        """
        msg = f"Couldn't parse message: {reason}"
        return Diagnostic(code=DiagnosticCode.PARSE_FAILED, message=msg)

    @staticmethod
    def positional_out_of_range(index: int, size: int) -> Diagnostic:
        """Positional argument index outside the argument list.

        Args:
            index: Referenced index
            size: Number of positional arguments supplied

        Returns:
            Diagnostic for POSITIONAL_ARGUMENT_OUT_OF_RANGE
        """
        msg = f"Positional argument {index} not provided ({size} argument(s) given)"
        return Diagnostic(
            code=DiagnosticCode.POSITIONAL_ARGUMENT_OUT_OF_RANGE,
            message=msg,
            hint="Pass at least index + 1 positional arguments",
        )

    @staticmethod
    def named_not_provided(name: str) -> Diagnostic:
        """Named argument absent from the argument mapping.

        Args:
            name: The argument name

        Returns:
            Diagnostic for NAMED_ARGUMENT_NOT_PROVIDED
        """
        msg = f"Argument '{name}' not provided"
        return Diagnostic(
            code=DiagnosticCode.NAMED_ARGUMENT_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{name}' in the arguments mapping",
        )

    @staticmethod
    def argument_bag_mismatch(reference_kind: str, expected: str, received: str) -> Diagnostic:
        """Argument reference kind does not fit the argument bag shape.

        Args:
            reference_kind: "positional" or "named"
            expected: Bag shape the reference requires
            received: Type name of the supplied bag

        Returns:
            Diagnostic for ARGUMENT_BAG_MISMATCH
        """
        msg = f"A {reference_kind} argument requires a {expected} of arguments, got {received}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_BAG_MISMATCH,
            message=msg,
            hint="Positional references need a list, named references need a mapping",
        )

    @staticmethod
    def plural_argument_not_numeric(value: object) -> Diagnostic:
        """Plural or ordinal selector is not a number.

        Args:
            value: The resolved argument

        Returns:
            Diagnostic for PLURAL_ARGUMENT_NOT_NUMERIC
        """
        msg = f"Plural argument must be a number, got {type(value).__name__} {value!r}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_ARGUMENT_NOT_NUMERIC,
            message=msg,
            hint="Use select for non-numeric discriminators",
        )

    @staticmethod
    def non_finite_number(value: object) -> Diagnostic:
        """Selector is NaN or infinite and has no integer part.

        Args:
            value: The resolved argument

        Returns:
            Diagnostic for NON_FINITE_NUMBER
        """
        msg = f"Cannot select a branch for non-finite number {value!r}"
        return Diagnostic(code=DiagnosticCode.NON_FINITE_NUMBER, message=msg)

    @staticmethod
    def no_matching_branch(key: object) -> Diagnostic:
        """No branch matched and "other" is missing.

        Args:
            key: The selector key that failed to match

        Returns:
            Diagnostic for NO_MATCHING_BRANCH
        """
        msg = f"No branch matches {key!r} and no 'other' branch exists"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCHING_BRANCH,
            message=msg,
            hint="Every select, plural and selectordinal must define an 'other' branch",
        )

    @staticmethod
    def named_format_not_found(name: str) -> Diagnostic:
        """Backend has no named format registered under this name.

        Args:
            name: The symbolic format name

        Returns:
            Diagnostic for NAMED_FORMAT_NOT_FOUND
        """
        msg = f"Named message format '{name}' is not defined by the backend"
        return Diagnostic(
            code=DiagnosticCode.NAMED_FORMAT_NOT_FOUND,
            message=msg,
            hint="Register the format in the backend's message_formats",
        )

    @staticmethod
    def unsupported_style(format_type: str, style: object) -> Diagnostic:
        """No formatter exists for this (type, style) combination.

        Args:
            format_type: Argument format type (number, date, ...)
            style: The style that was requested

        Returns:
            Diagnostic for UNSUPPORTED_STYLE
        """
        msg = f"Style {style!r} is not supported for format type '{format_type}'"
        return Diagnostic(code=DiagnosticCode.UNSUPPORTED_STYLE, message=msg)

    @staticmethod
    def value_outside_plural() -> Diagnostic:
        """Bare value placeholder evaluated with no enclosing plural.

        Returns:
            Diagnostic for VALUE_OUTSIDE_PLURAL
        """
        msg = "The 'value' placeholder can only be used inside a plural or selectordinal"
        return Diagnostic(code=DiagnosticCode.VALUE_OUTSIDE_PLURAL, message=msg)

    @staticmethod
    def parser_not_configured() -> Diagnostic:
        """Raw message text given but no parser collaborator configured.

        Returns:
            Diagnostic for PARSER_NOT_CONFIGURED
        """
        msg = "Message is raw text but no message parser is configured"
        return Diagnostic(
            code=DiagnosticCode.PARSER_NOT_CONFIGURED,
            message=msg,
            hint="Pass MessageOptions(parser=...) or supply a pre-parsed node sequence",
        )

    @staticmethod
    def unsupported_format(format_name: str, backend_name: str) -> Diagnostic:
        """Backend cannot render this format at all.

        Args:
            format_name: Requested format (e.g. spellout)
            backend_name: Backend class name

        Returns:
            Diagnostic for UNSUPPORTED_FORMAT
        """
        msg = f"Format '{format_name}' is not supported by {backend_name}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FORMAT,
            message=msg,
            hint="Use a backend that provides rule-based number formatting",
        )

    @staticmethod
    def unknown_node(node_type: str) -> Diagnostic:
        """Interpreter received an object that is not a message node.

        Args:
            node_type: Type name of the offending object

        Returns:
            Diagnostic for UNKNOWN_NODE
        """
        msg = f"Unknown message node type: {node_type}"
        return Diagnostic(code=DiagnosticCode.UNKNOWN_NODE, message=msg)

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Select/plural nesting deeper than the supported limit.

        Args:
            max_depth: The nesting limit that was exceeded

        Returns:
            Diagnostic for DEPTH_LIMIT_EXCEEDED
        """
        msg = f"Message nesting exceeds the maximum depth of {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.DEPTH_LIMIT_EXCEEDED,
            message=msg,
            hint="Flatten the message or split it into several messages",
        )

    @staticmethod
    def value_not_formattable(format_type: str) -> Diagnostic:
        """The value placeholder used as the argument of a typed format.

        Args:
            format_type: Format type of the enclosing simple format

        Returns:
            Diagnostic for VALUE_NOT_FORMATTABLE
        """
        msg = f"The 'value' placeholder cannot be formatted as '{format_type}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_FORMATTABLE,
            message=msg,
            hint="Format the plural argument itself, e.g. {count, number, percent}",
        )

    @staticmethod
    def formatting_failed(kind: str, value: object, reason: str) -> Diagnostic:
        """Locale-aware formatter raised.

        Args:
            kind: Formatter kind (number, date, list, ...)
            value: Value being formatted
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{kind.capitalize()} formatting failed for {value!r}: {reason}"
        return Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message=msg)

    @staticmethod
    def currency_required(value: object) -> Diagnostic:
        """Currency formatting requested with no currency code available.

        Args:
            value: Amount being formatted

        Returns:
            Diagnostic for CURRENCY_REQUIRED
        """
        msg = f"No currency code available to format {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_REQUIRED,
            message=msg,
            hint="Pass a Money value or set 'currency' in the options",
        )

    @staticmethod
    def unit_required(value: object) -> Diagnostic:
        """Unit formatting requested with no measurement unit available.

        Args:
            value: Value being formatted

        Returns:
            Diagnostic for UNIT_REQUIRED
        """
        msg = f"No measurement unit available to format {value!r}"
        return Diagnostic(
            code=DiagnosticCode.UNIT_REQUIRED,
            message=msg,
            hint="Pass a Unit value or set 'unit' in the options",
        )
