"""Keyword-based category suggestions for ingredient names."""

from pantry_tracker.domain.inventory import Category

# Scanned in this order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.VEGETABLES: (
        "菜", "茄", "椒", "薯", "瓜", "豆", "菇", "笋",
        "萝卜", "葱", "蒜", "姜", "芹", "兰",
    ),  # fmt: skip
    Category.FRUITS: (
        "果", "莓", "桃", "柑", "橘", "橙", "蕉", "梨",
        "枣", "瓜", "西瓜", "哈密瓜", "榴莲", "芒果",
    ),  # fmt: skip
    Category.DAIRY: ("奶", "酪", "乳", "蛋", "奶油", "芝士", "黄油"),
    Category.MEAT: (
        "肉", "肠", "翅", "腿", "腹", "肝", "心", "培根", "火腿", "排骨",
    ),  # fmt: skip
    Category.FISH: ("鱼", "虾", "蟹", "蚝", "蚬", "鱿", "鲍", "螺", "鳕", "鳗"),
    Category.OTHERS: (),
}

CATEGORY_LABELS: dict[Category, str] = {
    Category.VEGETABLES: "蔬菜",
    Category.FRUITS: "水果",
    Category.DAIRY: "乳制品",
    Category.MEAT: "肉类",
    Category.FISH: "鱼类",
    Category.OTHERS: "其他",
}


def classify(name: str) -> Category:
    """Suggest a category for an ingredient name."""
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in name for keyword in keywords):
            return category
    return Category.OTHERS


def parse_category(raw: str | None) -> Category:
    """Map a loosely-typed category string onto the fixed set."""
    if raw is None:
        return Category.OTHERS
    cleaned = raw.strip()
    for category, label in CATEGORY_LABELS.items():
        if cleaned.lower() == category.value or cleaned == label:
            return category
    return Category.OTHERS
