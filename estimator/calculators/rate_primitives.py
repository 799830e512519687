"""Rate and multiplier primitives for estimate pricing.

This module implements the small numeric building blocks used by every
pricing calculation:
- Markup on cost (cost × (1 + markup%))
- Price from a target gross margin (cost / (1 - margin%))
- Rounding to a step ('5', '25', 'nearest_0.10', ...)
- Tax over a taxable basis

None of these functions raise on numeric edge cases. Each undefined case
has a fixed fallback:
- margin >= 100% prices at cost × 2
- an unparseable rounding rule leaves the amount unchanged
- a step too fine for the amount leaves the amount unchanged

All arithmetic is done in Decimal. Plain ints, floats and numeric strings
are accepted and converted through ``str``.
"""

import logging
import re
from decimal import (
    ROUND_HALF_DOWN,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

_NEAREST_PATTERN = re.compile(r"nearest_([\d.]+)")

TAX_CATEGORIES = ("materials", "labor", "subs", "equipment", "logistics")


def to_decimal(value: Optional[Number]) -> Decimal:
    """Convert a numeric value to Decimal; None becomes zero.

    Args:
        value: Number to convert

    Returns:
        The value as a Decimal

    Example:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal(None)
        Decimal('0')
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_cents(amount: Number) -> Decimal:
    """Round an amount half-up to the cent.

    Amounts of any size are quantized; precision is raised as needed to
    keep every digit left of the decimal point.

    Example:
        >>> quantize_cents(Decimal("53.125"))
        Decimal('53.13')
    """
    amount = to_decimal(amount)
    if not amount.is_finite():
        return amount

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def apply_markup(cost: Number, markup_percent: Number) -> Decimal:
    """Apply a percentage markup to a cost.

    Formula: cost × (1 + markup_percent / 100)

    Negative markups act as discounts. The cost is not validated.

    Args:
        cost: Cost to mark up
        markup_percent: Markup in percent

    Returns:
        Marked-up amount

    Example:
        >>> apply_markup(Decimal("1000"), Decimal("30"))
        Decimal('1300.0')
    """
    cost = to_decimal(cost)
    return cost * (ONE + to_decimal(markup_percent) / HUNDRED)


def price_from_margin(cost: Number, target_margin_percent: Number) -> Decimal:
    """Compute the price that yields a target gross margin.

    Formula: cost / (1 - target_margin_percent / 100)

    A target of 100% or more has no finite price; such targets are priced
    at exactly twice the cost.

    Args:
        cost: Total cost
        target_margin_percent: Gross margin target in percent

    Returns:
        Price hitting the margin target, or cost × 2 for targets >= 100%

    Example:
        >>> price_from_margin(Decimal("600"), Decimal("40")) == Decimal("1000")
        True
        >>> price_from_margin(Decimal("600"), Decimal("100"))
        Decimal('1200')
    """
    cost = to_decimal(cost)
    margin = to_decimal(target_margin_percent)

    if margin >= HUNDRED:
        logger.debug(
            "Margin target %s%% is not achievable, pricing at cost x 2", margin
        )
        return cost * 2

    return cost / (ONE - margin / HUNDRED)


def parse_rounding_step(rule: Optional[Number]) -> Optional[Decimal]:
    """Parse a rounding rule into a positive step.

    Accepted rules:
    - a number or numeric string: '1', '5', '10', '25', '100', 0.05
    - a 'nearest_N' token: 'nearest_1', 'nearest_0.10'

    Args:
        rule: Rounding rule

    Returns:
        The step, or None for 'none' and for anything that is not a usable
        positive step
    """
    if rule is None or isinstance(rule, bool):
        return None

    text = str(rule).strip()
    if text == "none":
        return None

    try:
        step = Decimal(text)
    except InvalidOperation:
        match = _NEAREST_PATTERN.fullmatch(text)
        if not match:
            return None
        try:
            step = Decimal(match.group(1))
        except InvalidOperation:
            return None

    if not step.is_finite() or step <= ZERO:
        return None
    return step


def apply_rounding(amount: Number, rule: Optional[Number]) -> Decimal:
    """Round an amount to the nearest multiple of a step.

    Halves round toward positive infinity: 2.5 steps become 3 and -2.5
    steps become -2. The rule 'none', any rule that cannot be parsed, and a
    step so fine that the step count exceeds the decimal precision leave
    the amount unchanged.

    Args:
        amount: Amount to round
        rule: Rounding rule ('none', a step, or 'nearest_N')

    Returns:
        Rounded amount

    Example:
        >>> apply_rounding(Decimal("2879.296875"), "nearest_1")
        Decimal('2879')
        >>> apply_rounding(Decimal("1234.56"), "25")
        Decimal('1225')
        >>> apply_rounding(Decimal("1234.56"), "bogus")
        Decimal('1234.56')
        >>> apply_rounding(Decimal("-2.5"), "1")
        Decimal('-2')
    """
    amount = to_decimal(amount)
    step = parse_rounding_step(rule)

    if step is None:
        if rule is not None and str(rule).strip() != "none":
            logger.debug("Unparseable rounding rule %r, amount left unchanged", rule)
        return amount

    quotient = amount / step
    rounding = ROUND_HALF_UP if quotient >= ZERO else ROUND_HALF_DOWN
    try:
        steps = quotient.quantize(ONE, rounding=rounding)
    except InvalidOperation:
        logger.debug(
            "Rounding step %s too fine for %s, amount left unchanged", step, amount
        )
        return amount
    return steps * step


def compute_tax(
    taxable_basis: Number, tax_rate_percent: Number, rounding_rule: str = "cent"
) -> Decimal:
    """Compute tax over a taxable basis.

    Formula: taxable_basis × tax_rate_percent / 100, rounded half-up to the
    cent unless ``rounding_rule`` is 'none'.

    Args:
        taxable_basis: Amount subject to tax
        tax_rate_percent: Tax rate in percent
        rounding_rule: 'none' or 'cent'

    Returns:
        Tax amount

    Example:
        >>> compute_tax(Decimal("1000"), Decimal("13"))
        Decimal('130.00')
        >>> compute_tax(Decimal("10.05"), Decimal("13"), "none")
        Decimal('1.3065')
    """
    raw_tax = to_decimal(taxable_basis) * to_decimal(tax_rate_percent) / HUNDRED

    if rounding_rule == "none":
        return raw_tax
    return quantize_cents(raw_tax)


def taxable_basis(
    category_totals: Mapping[str, Number], tax_applies_to: Mapping[str, bool]
) -> Decimal:
    """Sum the cost categories flagged as taxable.

    Args:
        category_totals: Cost per category (materials, labor, subs,
            equipment, logistics)
        tax_applies_to: Taxable flag per category

    Returns:
        Taxable basis

    Example:
        >>> taxable_basis(
        ...     {"materials": Decimal("1000"), "labor": Decimal("500")},
        ...     {"materials": True, "labor": False},
        ... )
        Decimal('1000')
    """
    basis = ZERO
    for category in TAX_CATEGORIES:
        if tax_applies_to.get(category, False):
            basis += to_decimal(category_totals.get(category))
    return basis


def category_totals(
    materials: Number,
    labor: Number,
    subs: Number,
    equipment: Number,
    logistics: Number,
) -> Dict[str, Decimal]:
    """Build the per-category totals mapping used for the taxable basis."""
    return {
        "materials": to_decimal(materials),
        "labor": to_decimal(labor),
        "subs": to_decimal(subs),
        "equipment": to_decimal(equipment),
        "logistics": to_decimal(logistics),
    }
