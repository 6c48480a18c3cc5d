"""Domain exceptions raised by the request adapter and task functions.

Every error carries a user-facing message in Burmese. Diagnostic detail
(status codes, upstream messages, raw model text) is attached as attributes so
callers can log it without parsing the message.
"""

from __future__ import annotations


class BurmeseAIError(RuntimeError):
    """Base class for all task and provider failures."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        """Initialize the localized message and an optional remediation hint."""

        super().__init__(message)
        self.message = message
        self.hint = hint


class MissingCredentialError(BurmeseAIError):
    """Raised before any network call when no API key was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "သင်၏ Gemini API Key ကို Settings တွင် ထည့်သွင်းပါ။",
            hint="Pass `--api-key`, set `GEMINI_API_KEY`, or use `--prompt-api-key`.",
        )


class InvalidCredentialError(BurmeseAIError):
    """Raised when the upstream service rejects the supplied API key."""

    def __init__(self, *, status_code: int, upstream_message: str = "") -> None:
        super().__init__(
            "သင်ထည့်သွင်းထားသော API Key သည် မှားယွင်းနေပါသည်။ "
            "ကျေးဇူးပြု၍ Settings တွင် ပြန်လည်စစ်ဆေးပါ။",
            hint="Check the Gemini API key in your settings.",
        )
        self.status_code = status_code
        self.upstream_message = upstream_message


class UpstreamError(BurmeseAIError):
    """Raised for a non-success upstream response other than a credential problem."""

    def __init__(self, *, status_code: int, upstream_message: str = "") -> None:
        detail = f" {upstream_message}" if upstream_message else ""
        super().__init__(
            f"AI ဝန်ဆောင်မှုသို့ ခေါ်ဆိုမှု မအောင်မြင်ပါ (HTTP {status_code})။{detail}"
        )
        self.status_code = status_code
        self.upstream_message = upstream_message


class ContentBlockedError(BurmeseAIError):
    """Raised when the upstream service withheld output for safety reasons."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"AI မှ တုန့်ပြန်မှုကို မူဝါဒအရ ပိတ်ဆို့ထားပါသည်။ အကြောင်းရင်း: {reason}"
        )
        self.reason = reason


class EmptyResponseError(BurmeseAIError):
    """Raised when a successful response carries no usable content."""

    def __init__(self) -> None:
        super().__init__("AI မှ မမျှော်လင့်သော တုန့်ပြန်မှု ရရှိပါသည်။")


class MalformedStructuredOutputError(BurmeseAIError):
    """Raised when structured mode expected JSON but the model text did not parse."""

    def __init__(self, raw_text: str, message: str | None = None) -> None:
        super().__init__(
            message or "AI ၏ တုန့်ပြန်မှုကို JSON အဖြစ် ဖတ်ရှု၍ မရပါ။"
        )
        self.raw_text = raw_text


class StructuredOutputSchemaError(MalformedStructuredOutputError):
    """Raised when parsed JSON does not match the expected result shape."""

    def __init__(self, raw_text: str, detail: str) -> None:
        super().__init__(
            raw_text,
            f"AI ၏ တုန့်ပြန်မှုပုံစံ မှားယွင်းနေပါသည်။ ({detail})",
        )
        self.detail = detail


class TransportFailureError(BurmeseAIError):
    """Raised when the request could not reach the upstream service."""

    def __init__(self, detail: str, *, timed_out: bool = False) -> None:
        super().__init__(
            "AI ဝန်ဆောင်မှုသို့ ချိတ်ဆက်၍ မရပါ။ အင်တာနက်ချိတ်ဆက်မှုကို စစ်ဆေးပါ။"
        )
        self.detail = detail
        self.timed_out = timed_out
