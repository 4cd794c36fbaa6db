"""
Capability sets и generic функции numtraits

Каждый модуль описывает набор capability sets (абстрактные классы)
и generic функции, которые находят conformance типа аргумента в registry.
"""

# Identities & Num
from numtraits.capabilities.identities import (
    Num,
    One,
    ParseNumError,
    Two,
    Zero,
    from_str_radix,
    is_one,
    is_two,
    is_zero,
    one,
    two,
    zero,
)

# Bounded
from numtraits.capabilities.bounds import (
    Bounded,
    LowerBounded,
    UpperBounded,
    max_value,
    min_value,
)

# Checked / Wrapping / Saturating / Overflowing
from numtraits.capabilities.checked import (
    CheckedAdd,
    CheckedDiv,
    CheckedMul,
    CheckedNeg,
    CheckedOps,
    CheckedRem,
    CheckedShl,
    CheckedShr,
    CheckedSub,
    checked_add,
    checked_div,
    checked_mul,
    checked_neg,
    checked_rem,
    checked_shl,
    checked_shr,
    checked_sub,
)
from numtraits.capabilities.wrapping import (
    WrappingAdd,
    WrappingDiv,
    WrappingMul,
    WrappingNeg,
    WrappingOps,
    WrappingRem,
    WrappingShl,
    WrappingShr,
    WrappingSub,
    wrapping_add,
    wrapping_div,
    wrapping_mul,
    wrapping_neg,
    wrapping_rem,
    wrapping_shl,
    wrapping_shr,
    wrapping_sub,
)
from numtraits.capabilities.saturating import (
    Saturating,
    SaturatingAdd,
    SaturatingDiv,
    SaturatingMul,
    SaturatingSub,
    saturating_add,
    saturating_div,
    saturating_mul,
    saturating_sub,
)
from numtraits.capabilities.overflowing import (
    OverflowingAdd,
    OverflowingDiv,
    OverflowingMul,
    OverflowingNeg,
    OverflowingOps,
    OverflowingRem,
    OverflowingShl,
    OverflowingShr,
    OverflowingSub,
    overflowing_add,
    overflowing_div,
    overflowing_mul,
    overflowing_neg,
    overflowing_rem,
    overflowing_shl,
    overflowing_shr,
    overflowing_sub,
)

# Casting
from numtraits.capabilities.cast import (
    AsPrimitive,
    FromPrimitive,
    NumCast,
    ToPrimitive,
    as_,
    cast,
    to_exact,
)

# Safe casts & coercion
from numtraits.capabilities.safe_cast import (
    Layout,
    NumberKind,
    SafeCast,
    SignCast,
    grow_into,
    grows_into,
    layout_of,
    signed,
    size_into,
    trim_into,
    trims_into,
    unsigned,
)
from numtraits.capabilities.coerced import Coerced, coerce_from, coerce_into

# Sign
from numtraits.capabilities.sign import (
    Sign,
    Signed,
    Unsigned,
    abs_,
    abs_sub,
    is_negative,
    is_positive,
    signum,
)

# Float tiers
from numtraits.capabilities.float import (
    Float,
    FloatCore,
    FpCategory,
    Real,
    ceil,
    classify,
    copysign,
    epsilon,
    floor,
    fmax,
    fmin,
    fract,
    from_bits,
    infinity,
    integer_decode,
    is_finite,
    is_infinite,
    is_nan,
    is_normal,
    is_subnormal,
    min_positive_value,
    mul_add,
    nan,
    neg_infinity,
    neg_zero,
    powf,
    round_,
    sqrt,
    to_bits,
    trunc,
)

# Pow & Inv
from numtraits.capabilities.pow import Inv, Pow, checked_pow, inv, pow, pow_by_squaring

# Euclid
from numtraits.capabilities.euclid import (
    CheckedEuclid,
    Euclid,
    checked_div_euclid,
    checked_rem_euclid,
    div_euclid,
    div_rem_euclid,
    rem_euclid,
)

# Bits & bytes
from numtraits.capabilities.bits import (
    Bits,
    PrimInt,
    ToFromBytes,
    WideningMul,
    bits,
    count_ones,
    count_zeros,
    from_be_bytes,
    from_le_bytes,
    from_ne_bytes,
    leading_zeros,
    reverse_bits,
    rotate_left,
    rotate_right,
    swap_bytes,
    to_be_bytes,
    to_le_bytes,
    to_ne_bytes,
    trailing_zeros,
    widening_mul,
)

# Norm & distance
from numtraits.capabilities.dist import Distance, Norm, distance, norm, normalized

# Checked folds & induction
from numtraits.capabilities.iter import checked_product, checked_sum
from numtraits.capabilities.induction import nth

__all__ = [
    # Identities & Num
    "Zero", "One", "Two", "Num", "ParseNumError",
    "zero", "is_zero", "one", "is_one", "two", "is_two", "from_str_radix",
    # Bounded
    "LowerBounded", "UpperBounded", "Bounded", "min_value", "max_value",
    # Checked
    "CheckedAdd", "CheckedSub", "CheckedMul", "CheckedDiv", "CheckedRem",
    "CheckedNeg", "CheckedShl", "CheckedShr", "CheckedOps",
    "checked_add", "checked_sub", "checked_mul", "checked_div", "checked_rem",
    "checked_neg", "checked_shl", "checked_shr",
    # Wrapping
    "WrappingAdd", "WrappingSub", "WrappingMul", "WrappingDiv", "WrappingRem",
    "WrappingNeg", "WrappingShl", "WrappingShr", "WrappingOps",
    "wrapping_add", "wrapping_sub", "wrapping_mul", "wrapping_div", "wrapping_rem",
    "wrapping_neg", "wrapping_shl", "wrapping_shr",
    # Saturating
    "SaturatingAdd", "SaturatingSub", "SaturatingMul", "SaturatingDiv", "Saturating",
    "saturating_add", "saturating_sub", "saturating_mul", "saturating_div",
    # Overflowing
    "OverflowingAdd", "OverflowingSub", "OverflowingMul", "OverflowingDiv",
    "OverflowingRem", "OverflowingNeg", "OverflowingShl", "OverflowingShr",
    "OverflowingOps",
    "overflowing_add", "overflowing_sub", "overflowing_mul", "overflowing_div",
    "overflowing_rem", "overflowing_neg", "overflowing_shl", "overflowing_shr",
    # Casting
    "ToPrimitive", "FromPrimitive", "NumCast", "AsPrimitive", "to_exact", "cast", "as_",
    # Safe casts & coercion
    "NumberKind", "Layout", "SafeCast", "SignCast", "layout_of", "grows_into", "trims_into",
    "grow_into", "trim_into", "size_into", "signed", "unsigned",
    "Coerced", "coerce_into", "coerce_from",
    # Sign
    "Sign", "Signed", "Unsigned",
    "is_positive", "is_negative", "abs_", "signum", "abs_sub",
    # Float tiers
    "FpCategory", "FloatCore", "Real", "Float",
    "nan", "infinity", "neg_infinity", "neg_zero", "epsilon", "min_positive_value",
    "is_nan", "is_infinite", "is_finite", "is_normal", "is_subnormal", "classify",
    "fmin", "fmax", "copysign", "to_bits", "from_bits", "integer_decode",
    "floor", "ceil", "round_", "trunc", "fract", "sqrt", "mul_add", "powf",
    # Pow & Inv
    "Pow", "Inv", "pow", "pow_by_squaring", "checked_pow", "inv",
    # Euclid
    "Euclid", "CheckedEuclid",
    "div_euclid", "rem_euclid", "div_rem_euclid", "checked_div_euclid", "checked_rem_euclid",
    # Bits & bytes
    "Bits", "PrimInt", "WideningMul", "ToFromBytes",
    "bits", "count_ones", "count_zeros", "leading_zeros", "trailing_zeros",
    "rotate_left", "rotate_right", "swap_bytes", "reverse_bits", "widening_mul",
    "to_be_bytes", "to_le_bytes", "to_ne_bytes",
    "from_be_bytes", "from_le_bytes", "from_ne_bytes",
    # Norm & distance
    "Norm", "Distance", "norm", "normalized", "distance",
    # Checked folds & induction
    "checked_sum", "checked_product", "nth",
]
