# Re-export schedule components
from .core import GeneratedRange, RangeParameters
from .generator import (
    generate,
    generate_days,
    generate_month_exact,
    generate_month_extended,
    generate_week,
)
from .navigator import next_parameters, previous_parameters
from .offset import apply_offset
