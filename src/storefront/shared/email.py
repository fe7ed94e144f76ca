"""EmailAddress value object for customer contact addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@storefront.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts, a dotted domain without
    leading or trailing hyphens in its labels, no whitespace, no consecutive
    dots and none of the characters that need quoting.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def address_must_be_well_formed(self):
        if self.address and not _is_well_formed(self.address):
            raise ValidationError({"address": [f"Invalid email address: {self.address!r}"]})


def _is_well_formed(email: str) -> bool:
    if any(ch.isspace() for ch in email) or email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False
    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False
    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        return False
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        return False

    return not any(forbidden in email for forbidden in FORBIDDEN_CHARACTERS)
