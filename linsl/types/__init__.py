from linsl.types.symbol import Symbol
from linsl.types.position import Position, SList
from linsl.types.errors import LinslError, LinslInternalError, LinslSyntaxError, UnbalancedParens
from linsl.types.environment import Environment
from linsl.types.closure import Closure, Macro
from linsl.types.primitive import Primitive
from linsl.types.variant import variant_name
