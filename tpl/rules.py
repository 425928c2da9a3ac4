"""
Ordered classification rules: (predicate, target) pairs, first match wins.

Upstream license metadata is inconsistent, so every rule here is an exact
string, a case-sensitive full-match pattern or a reference url. Name
patterns alone cannot tell CDDL 1.0 from 1.1, those are decided by url.
"""
import re
from dataclasses import dataclass
from typing import Callable

from tpl.catalog import CanonicalLicense

# Bare "BSD" does not say which clause variant applies. These modules were
# checked by hand and ship the 3-clause text; anything else stays unknown.
REVIEWED_BARE_BSD_MODULES = (
    "dk.brics:automaton",
    "org.picocontainer:picocontainer",
    "org.ow2.asm:asm",
)


@dataclass(frozen=True)
class Rule:
    description: str
    predicate: Callable
    target: CanonicalLicense

    def matches(self, declared, coordinate):
        return bool(self.predicate(declared, coordinate))


def name_equals(name):
    return lambda declared, coordinate: declared.name == name


def name_matches(*patterns):
    compiled = [re.compile(p) for p in patterns]
    return lambda declared, coordinate: any(c.fullmatch(declared.name) for c in compiled)


def url_equals(*urls):
    accepted = frozenset(urls)
    return lambda declared, coordinate: declared.url in accepted


def any_of(*predicates):
    return lambda declared, coordinate: any(p(declared, coordinate) for p in predicates)


def bare_name_for_modules(name, module_ids):
    accepted = frozenset(module_ids)
    return lambda declared, coordinate: declared.name == name and coordinate.module_id in accepted


def build_rules(bare_bsd_modules=REVIEWED_BARE_BSD_MODULES):
    return (
        Rule(
            "Apache 2.0 by name",
            name_matches(r".*Apache.*[\s\-v](2\.0.*|2(\s.*|$))"),
            CanonicalLicense.APACHE_2_0,
        ),
        Rule("Bouncy Castle", name_equals("Bouncy Castle Licence"), CanonicalLicense.BOUNCY_CASTLE),
        Rule(
            "BSD 2-clause by name",
            name_matches(r"(.*BSD.*2.*[Cc]lause.*)|(.*2.*[Cc]lause.*BSD.*)"),
            CanonicalLicense.BSD_2_CLAUSE,
        ),
        Rule(
            "BSD 3-clause by name or url",
            any_of(
                name_matches(r"(.*BSD.*3.*[Cc]lause.*)|(.*3.*[Cc]lause.*BSD.*)|(.*[Nn]ew.*BSD.*)|(.*BSD.*[Nn]ew.*)"),
                url_equals("https://opensource.org/licenses/BSD-3-Clause"),
            ),
            CanonicalLicense.BSD_3_CLAUSE,
        ),
        Rule("CC0", name_equals("CC0"), CanonicalLicense.CC0_1_0),
        Rule(
            "CDDL 1.0 by url",
            url_equals("https://glassfish.dev.java.net/public/CDDLv1.0.html"),
            CanonicalLicense.CDDL_1_0,
        ),
        Rule(
            "CDDL 1.1 by url",
            url_equals(
                "https://oss.oracle.com/licenses/CDDL+GPL-1.1",
                "https://github.com/javaee/javax.annotation/blob/master/LICENSE",
                "https://glassfish.java.net/public/CDDL+GPL_1_1.html",
            ),
            CanonicalLicense.CDDL_1_1,
        ),
        Rule(
            "EDL 1.0 by name",
            name_matches(r".*(EDL|Eclipse.*Distribution.*License).*1\.0.*"),
            CanonicalLicense.EDL_1_0,
        ),
        Rule(
            "EPL 1.0 by name",
            name_matches(r".*(EPL|Eclipse.*Public.*License).*1\.0.*"),
            CanonicalLicense.EPL_1_0,
        ),
        Rule(
            "EPL 2.0 by name",
            name_matches(r".*(EPL|Eclipse.*Public.*License).*2\.0.*"),
            CanonicalLicense.EPL_2_0,
        ),
        Rule("Go", name_equals("Go License"), CanonicalLicense.GO),
        Rule("MIT by name", name_matches(r".*MIT(\s.*|$)"), CanonicalLicense.MIT),
        Rule("MIT-0 by name", name_matches(r".*MIT-0.*"), CanonicalLicense.MIT_0),
        Rule("Public Domain", name_equals("Public Domain"), CanonicalLicense.PUBLIC_DOMAIN),
        Rule(
            "W3C 1998-07-20 by url",
            url_equals("http://www.w3.org/Consortium/Legal/copyright-software-19980720"),
            CanonicalLicense.W3C_19980720,
        ),
        # name and url are not enough from here on, modules were checked individually
        Rule(
            "bare BSD, reviewed modules",
            bare_name_for_modules("BSD", bare_bsd_modules),
            CanonicalLicense.BSD_3_CLAUSE,
        ),
    )


DEFAULT_RULES = build_rules()
