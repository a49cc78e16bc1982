# Brands that only ever produced false positives in titles.
IGNORED_BRANDS = {"bio", "neb"}

# Short or common words that are only a brand when they open the title.
FRONT_ONLY_BRANDS = {
    "rich", "rff", "flex", "ultra", "gum", "beauty", "orto", "free", "112", "kin", "happy",
}

FRONT_OR_SECOND_BRANDS = {"heel", "contour", "nero", "rsv"}

CASE_SENSITIVE_BRAND_FORMS = {
    "happy": {"Happy", "HAPPY"},
}
