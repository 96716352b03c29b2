"""
Interfaces and Protocols for using xopt.

Definitions:

Protocols  - Functional specifications an object needs to implement to be used
Interfaces - Combined Functional and Structural specifications

Protocols have names: {}_p
Interfaces have names {}_i

Interfaces need to be inherited from.
"""

from .protocols import Buildable_p, OptionStruct_p, OptionTable_p
from .parser import ArgParser_i, TokenExpander_i
