"""EmailAddress value object — the email grammar registrations are checked against."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from identity.domain import identity

_FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _is_ip_literal(domain_part: str) -> bool:
    return domain_part.startswith("[") and domain_part.endswith("]")


def _violates_grammar(email: str) -> bool:
    if any(ch.isspace() for ch in email):
        return True

    if email.count("@") != 1:
        return True

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return True
    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return True
    if ".." in local_part or ".." in domain_part:
        return True

    ip_literal = _is_ip_literal(domain_part)
    if not ip_literal:
        if "." not in domain_part:
            return True
        if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
            return True

    for forbidden in _FORBIDDEN_CHARACTERS:
        if forbidden in email and not (forbidden in "[]" and ip_literal):
            return True

    return False


@identity.value_object
class EmailAddress:
    """A syntactically valid email address.

    Enforces structural validity: exactly one @, non-empty local and domain
    parts, no leading/trailing or consecutive dots, a dotted domain (or an
    ``[ip-literal]``), no hyphen at either end of a domain label, and none of
    the characters that need quoting in an address.
    """

    address: String(required=True, max_length=254, sanitize=False)

    @invariant.post
    def address_must_follow_email_grammar(self):
        if _violates_grammar(self.address):
            raise ValidationError({"address": [f"Invalid email address: {self.address!r}"]})
