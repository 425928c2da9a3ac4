"""
Closed catalog of reviewed licenses and the default preference order.
Only members of CanonicalLicense can appear in a rendered report.
"""
from dataclasses import dataclass
from enum import Enum


class CanonicalLicense(Enum):
    APACHE_2_0 = ("Apache-2.0", "Apache License 2.0", "https://spdx.org/licenses/Apache-2.0.html")
    BOUNCY_CASTLE = ("Bouncy Castle", "Bouncy Castle Licence", "https://www.bouncycastle.org/licence.html")
    BSD_2_CLAUSE = ("BSD-2-Clause", "BSD 2-Clause \"Simplified\" License", "https://spdx.org/licenses/BSD-2-Clause.html")
    BSD_3_CLAUSE = ("BSD-3-Clause", "BSD 3-Clause \"New\" or \"Revised\" License", "https://spdx.org/licenses/BSD-3-Clause.html")
    CC0_1_0 = ("CC0-1.0", "Creative Commons Zero v1.0 Universal", "https://spdx.org/licenses/CC0-1.0.html")
    CDDL_1_0 = ("CDDL-1.0", "Common Development and Distribution License 1.0", "https://spdx.org/licenses/CDDL-1.0.html")
    CDDL_1_1 = ("CDDL-1.1", "Common Development and Distribution License 1.1", "https://spdx.org/licenses/CDDL-1.1.html")
    EDL_1_0 = ("EDL-1.0", "Eclipse Distribution License - v 1.0", "https://www.eclipse.org/org/documents/edl-v10.php")
    EPL_1_0 = ("EPL-1.0", "Eclipse Public License 1.0", "https://spdx.org/licenses/EPL-1.0.html")
    EPL_2_0 = ("EPL-2.0", "Eclipse Public License 2.0", "https://spdx.org/licenses/EPL-2.0.html")
    GO = ("Go", "Go License", "https://golang.org/LICENSE")
    MIT = ("MIT", "MIT License", "https://spdx.org/licenses/MIT.html")
    MIT_0 = ("MIT-0", "MIT No Attribution", "https://spdx.org/licenses/MIT-0.html")
    PUBLIC_DOMAIN = ("Public Domain", "Public Domain", "https://creativecommons.org/publicdomain/mark/1.0/")
    W3C_19980720 = ("W3C-19980720", "W3C Software Notice and License (1998-07-20)", "https://spdx.org/licenses/W3C-19980720.html")

    def __init__(self, catalog_id, full_name, reference_url):
        self.catalog_id = catalog_id
        self.full_name = full_name
        self.reference_url = reference_url

    def __str__(self):
        return self.catalog_id


@dataclass(frozen=True)
class UnknownLicense:
    """A declaration no rule recognized; kept verbatim for diagnostics."""

    full_name: str
    url: str | None = None

    def __str__(self):
        if self.url:
            return f"{self.full_name} ({self.url})"
        return self.full_name


# most preferred first; a license missing here is never chosen
DEFAULT_PRIORITY = (
    CanonicalLicense.APACHE_2_0,
    CanonicalLicense.MIT,
    CanonicalLicense.MIT_0,
    CanonicalLicense.BOUNCY_CASTLE,
    CanonicalLicense.BSD_3_CLAUSE,
    CanonicalLicense.BSD_2_CLAUSE,
    CanonicalLicense.GO,
    CanonicalLicense.CC0_1_0,
    CanonicalLicense.PUBLIC_DOMAIN,
    CanonicalLicense.W3C_19980720,
    CanonicalLicense.EDL_1_0,
    CanonicalLicense.EPL_2_0,
    CanonicalLicense.EPL_1_0,
    CanonicalLicense.CDDL_1_1,
    CanonicalLicense.CDDL_1_0,
)

_BY_ID = {member.catalog_id: member for member in CanonicalLicense}


def license_by_id(catalog_id):
    """Return the catalog member for catalog_id, or None if it is not in the catalog."""
    return _BY_ID.get(catalog_id)
