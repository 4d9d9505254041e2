"""Hypothesis strategies for property-based testing of fp_combinators."""

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers(min_value=-10_000, max_value=10_000)
texts = st.text(min_size=0, max_size=50)
booleans = st.booleans()

# Values that Maybe.of wraps in Just (anything but None)
present_values = st.one_of(integers, texts, booleans, st.floats(allow_nan=False))

# Scalars for Collection singleton promotion (str counts as a scalar)
scalars = st.one_of(integers, texts, booleans, st.none())

int_lists = st.lists(integers, max_size=10)

# -----------------------------------------------------------------------------
# Function strategies
# -----------------------------------------------------------------------------

# Total unary int -> int functions
int_functions = st.sampled_from([
    lambda x: x + 1,
    lambda x: x - 3,
    lambda x: x * 2,
    lambda x: -x,
    abs,
    lambda x: x // 2,
])

# Binary int functions for partial application
binary_functions = st.sampled_from([
    lambda a, b: a + b,
    lambda a, b: a - b,
    lambda a, b: a * b,
    max,
    min,
])
