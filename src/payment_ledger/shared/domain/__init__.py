from .exception import (
    DomainException as DomainException,
)
from .exception import (
    InvalidArgumentException as InvalidArgumentException,
)
