import re
from typing import Any

from pydantic import BaseModel

_PRIVATE_PEM_LABEL = re.compile(r"PRIVATE KEY|CERTIFICATE")
_PUBLIC_PEM_LABEL = re.compile(r"PUBLIC KEY")
_ENCRYPTION_HEADER = re.compile(r"Proc-Type|DEK-Info")


class SslCertificates(BaseModel):
    ca: str | None = None
    cert: str | None = None
    key: str | None = None
    passphrase: str | None = None


def format_private_key(key: str, key_is_public: bool = False) -> str:  # noqa: FBT001 FBT002
    """Restore the line breaks of a PEM block pasted onto a single line.

    Keys that already contain line breaks are returned unchanged.
    """
    if not key or "\n" in key:
        return key

    label = _PUBLIC_PEM_LABEL if key_is_public else _PRIVATE_PEM_LABEL
    formatted = ""

    for part in filter(None, key.split("-----")):
        if label.search(part):
            formatted += f"-----{part}-----"
            continue

        if _ENCRYPTION_HEADER.search(part):
            part = re.sub(r":\s+", ":", part)  # noqa: PLW2901

        formatted += re.sub(r"\s+", "\n", part.replace("\\n", "\n"))

    return formatted


def set_agent_options(
    request_options: dict[str, Any],
    ssl_certificates: SslCertificates | None,
) -> None:
    if ssl_certificates is None:
        return

    request_options["agent_options"] = {
        name: format_private_key(value)
        for name, value in ssl_certificates.model_dump().items()
        if value
    }
