"""
Company keyword sets for owner classification.

A segment is a company when any of its words is one of these. Words are
lowercase letter runs, so periods separate words ("T.R." is "t" and "r").
Dotted abbreviations that must match as a whole are listed separately.
"""

# Corporate and limited-liability suffixes
CORPORATE_SUFFIXES = {
    "inc", "corp", "corporation", "co", "company",
    "llc", "ltd", "limited",
    "lp", "llp", "plc",
}

# Business designators commonly used in entity names
BUSINESS_DESIGNATORS = {
    "solutions", "services", "group", "partners", "holdings",
}

# Trusts (TR is the county abbreviation for TRUST / TRUSTEE)
TRUST_DESIGNATORS = {
    "trust", "tr",
}

# Banks and national associations
FINANCIAL_INSTITUTIONS = {
    "bank", "na",
}

# Associations, foundations and alliances
ASSOCIATIONS = {
    "association", "assn", "hoa", "foundation", "alliance",
}

# Religious organizations
RELIGIOUS_ORGANIZATIONS = {
    "ministries", "church",
}

COMPANY_KEYWORDS = frozenset(
    CORPORATE_SUFFIXES |
    BUSINESS_DESIGNATORS |
    TRUST_DESIGNATORS |
    FINANCIAL_INSTITUTIONS |
    ASSOCIATIONS |
    RELIGIOUS_ORGANIZATIONS
)

# Matched against the lowercased segment with the same non-letter bounds
DOTTED_COMPANY_KEYWORDS = (
    "l.l.c",
)
