from linsl.builtin.env_builtin import PRIMITIVES, register
