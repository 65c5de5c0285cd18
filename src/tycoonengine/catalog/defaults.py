"""Built-in fallback catalog used when the catalog source cannot be loaded."""

from __future__ import annotations

from typing import Any

DEFAULT_CATALOG_DATA: dict[str, list[dict[str, Any]]] = {
    "financial": [
        {"id": "deposit", "name": "예금", "icon": "💰", "baseCost": 50000, "baseIncome": 5, "costMultiplier": 1.15, "unlockCondition": "always"},  # noqa: E501
        {"id": "savings", "name": "적금", "icon": "🏦", "baseCost": 500000, "baseIncome": 75, "costMultiplier": 1.15, "unlockCondition": "deposit >= 1"},  # noqa: E501
        {"id": "domestic_stock", "name": "국내주식", "icon": "📈", "baseCost": 5000000, "baseIncome": 1125, "costMultiplier": 1.15, "unlockCondition": "savings >= 1"},  # noqa: E501
        {"id": "us_stock", "name": "미국주식", "icon": "🇺🇸", "baseCost": 25000000, "baseIncome": 6000, "costMultiplier": 1.15, "unlockCondition": "domestic_stock >= 1"},  # noqa: E501
        {"id": "crypto", "name": "코인", "icon": "₿", "baseCost": 100000000, "baseIncome": 25000, "costMultiplier": 1.15, "unlockCondition": "us_stock >= 1"},  # noqa: E501
    ],
    "realEstate": [
        {"id": "villa", "name": "빌라", "icon": "🏘️", "baseCost": 250000000, "baseIncome": 8438, "costMultiplier": 1.15, "unlockCondition": "crypto >= 1"},  # noqa: E501
        {"id": "officetel", "name": "오피스텔", "icon": "🏢", "baseCost": 350000000, "baseIncome": 17719, "costMultiplier": 1.15, "unlockCondition": "villa >= 1"},  # noqa: E501
        {"id": "apartment", "name": "아파트", "icon": "🏬", "baseCost": 800000000, "baseIncome": 60750, "costMultiplier": 1.15, "unlockCondition": "officetel >= 1"},  # noqa: E501
        {"id": "shop", "name": "상가", "icon": "🏪", "baseCost": 1200000000, "baseIncome": 137000, "costMultiplier": 1.15, "unlockCondition": "apartment >= 1"},  # noqa: E501
        {"id": "building", "name": "빌딩", "icon": "🏗️", "baseCost": 3000000000, "baseIncome": 514000, "costMultiplier": 1.15, "unlockCondition": "shop >= 1"},  # noqa: E501
    ],
    "careers": [
        {"id": "part_time", "name": "알바", "level": 0, "multiplier": 1.0, "requiredClicks": 0, "salary": 20000000, "achievement": None},  # noqa: E501
        {"id": "contract", "name": "계약직", "level": 1, "multiplier": 1.5, "requiredClicks": 20, "salary": 30000000, "achievement": "직장인"},  # noqa: E501
        {"id": "employee", "name": "사원", "level": 2, "multiplier": 2.0, "requiredClicks": 40, "salary": 40000000, "achievement": "정규직"},  # noqa: E501
        {"id": "assistant", "name": "대리", "level": 3, "multiplier": 2.5, "requiredClicks": 120, "salary": 50000000, "achievement": None},  # noqa: E501
        {"id": "manager", "name": "과장", "level": 4, "multiplier": 3.0, "requiredClicks": 240, "salary": 60000000, "achievement": "팀장"},  # noqa: E501
        {"id": "deputy", "name": "차장", "level": 5, "multiplier": 3.5, "requiredClicks": 400, "salary": 70000000, "achievement": None},  # noqa: E501
        {"id": "director", "name": "부장", "level": 6, "multiplier": 4.0, "requiredClicks": 600, "salary": 80000000, "achievement": None},  # noqa: E501
        {"id": "executive", "name": "상무", "level": 7, "multiplier": 5.0, "requiredClicks": 800, "salary": 100000000, "achievement": "임원"},  # noqa: E501
        {"id": "vice_president", "name": "전무", "level": 8, "multiplier": 10.0, "requiredClicks": 1200, "salary": 200000000, "achievement": None},  # noqa: E501
        {"id": "ceo", "name": "CEO", "level": 9, "multiplier": 25.0, "requiredClicks": 2000, "salary": 500000000, "achievement": "CEO"},  # noqa: E501
    ],
}
