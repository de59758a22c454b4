# yapexpr

`yapexpr` builds lazy expression trees out of ordinary Python operators.
An expression is an `Expression` node. Each node has a kind (`ExprKind`)
and a tuple of elements. Nothing is computed until you evaluate the tree.
You can also rewrite the tree with transforms before you evaluate it.

The package is a library only. It has no command-line tool.

## Installation

```
pip install .
```

To run the tests, install the `test` extra, which adds pytest:

```
pip install .[test]
pytest
```

## Building expressions

```python
from yapexpr.expression import make_terminal, placeholder, if_else
from yapexpr.transform import evaluate

unity = make_terminal(1.0)
expr = unity - 42          # an ExprKind.MINUS node; nothing is computed yet
evaluate(expr)             # -41.0

p3 = placeholder(3)
evaluate(p3 + 42, "15", 3, 1)   # placeholder N takes argument N: 1 + 42 == 43
```

An operator applied to an expression builds a new node:

- An operand that is already an expression is held through an `EXPR_REF` node.
- Any other operand is wrapped as a `TERMINAL`.

Python reflects comparisons, so `3 < expr` builds `expr > 3`.

Most unevaluated expressions have no truth value and raise `TypeError` when
tested. The exception is `==` and `!=` nodes, which compare their operands
by identity.

Python has no overloadable operator for some kinds of node. The
`yapexpr.expression` module provides plain functions for these: `if_else`,
`comma`, `logical_and`, `logical_or`, `logical_not` and `assign`.

Calling an expression builds a call node: `make_terminal(f)(1, 2)`.

Other helpers in `yapexpr.expression`:

- `make_expression(kind, *args)` builds a node of any kind.
- `as_expr` passes expressions through and wraps any other value.
- `is_expr` tells whether a value is an expression.

### Accessors

These functions return parts of a node:

- `value`, `left`, `right`
- `cond`, `then`, `else_`
- `callee`, `argument`, `get`
- `deref`

They look through `EXPR_REF` nodes, except `deref`, which is the function that dereferences them.

Used on a node of the wrong kind, an accessor raises `ExpressionError`, which is a subclass of `TypeError`. `argument` and `get` raise `IndexError` for an index out of range.

`yapexpr.kinds` provides:

- `arity_of(kind)`, which returns an `ExprArity`.
- `op_string(kind)`, which returns the operator spelling: for example `"+"`, `"?:"`, `"()"`, and `"term"` for terminals.

## Evaluation

`evaluate(expr, *args)` in `yapexpr.transform` computes a tree with Python's
own operators.

- `logical_and` and `logical_or` short-circuit.
- `if_else` evaluates only the branch it takes.
- `comma` returns its right operand.
- Assignment, compound-assignment and increment nodes store their result. The target must be a terminal or a subscript node.
- A placeholder index beyond the given arguments raises `IndexError`.

## Transforms

`transform(expr, *transforms)` rewrites a tree from the top down. At each
node it tries each transform in turn:

- **By kind.** If the transform has a method named after the node's kind (`terminal`, `plus`, `call`, ...), that method is called with the node's operands. Terminal operands are unwrapped to their values.
- **By whole node.** Otherwise, if the transform is callable, it is called with the node itself.

A result of `NotImplemented` means "no match".

When nothing matches:

- A terminal is returned unchanged.
- Any other node is rebuilt from its transformed operands.

`transform_strict` works the same way, but raises `StrictTransformError` when nothing matches a node.

`replace_placeholders(expr, *args)` replaces placeholder N with `args[N - 1]`. A value that is not an expression is wrapped as a terminal first.

## Printing

```python
from yapexpr.expression import make_terminal
from yapexpr.printing import format_expr

print(format_expr(make_terminal(1.0) + 42), end="")
# expr<+>
#     term<float>[=1] &
#     term<int>[=42]
```

`format_expr` renders one node per line:

- Children are indented four spaces.
- Operands held by reference end in ` &`.
- A value with no custom `str`/`repr` is shown as `<<unprintable-value>>`.

`print_expr(expr, stream)` writes the same text to a stream and returns the stream.

## Worked examples

These modules show the library in use.

- **`yapexpr.self_evaluation`**: `Matrix` is a dense matrix indexed as `m[row, col]`. `daxpy(a, x, y)` adds `a * x` into `y` in place. `UseDaxpy` is a transform that rewrites `scalar * matrix + matrix` into a `daxpy` call. `evaluate_matrix_expr` applies that transform and evaluates the result. `SelfEvaluating` is a matrix terminal with two methods: `assign(expr)` and `to_matrix()`.
- **`yapexpr.tarray`**: `TArray` is a three-integer array. Its expressions support only `+ - * /`, and integer division truncates towards zero. Indexing an array expression evaluates one element, using the `TakeNth` transform. `assign` stores an expression's value elementwise. `print_assign` also writes `result = expression` to a stream. `format_tarray_expr` renders an array expression in infix form.
- **`yapexpr.vec3`**: `Vec3` is a three-integer vector terminal. `assign` evaluates an expression once per component. `format()` returns `{x, y, z}`. `count_leaves` counts the vector terminals in an expression.
- **`yapexpr.vector_ops`**: `vec(list)` wraps a list as a terminal. `assign_to` and `plus_assign` evaluate an expression elementwise into an existing list. They first check the sizes with `equal_sizes` and raise `ValueError` on a mismatch.
- **`yapexpr.lazy_vector`**: `LazyVector` holds floats. Its expressions support `+` and `-` only. Indexing evaluates a single element, and `+=` updates the vector in place.
- **`yapexpr.transform_terminals`**: `IotaTerminalTransform` replaces the terminals of a tree with consecutive integers. It keeps the callable of a call node. `sum_ints` is a sample callable.
- **`yapexpr.map_assign`**: builds dictionaries from chained calls, for example `map_list_of("<", 1)("<=", 2).to_dict()`. The resulting dict is ordered by key, and a repeated key keeps its first value. The module also has `make_map_with_expressions` and `make_map_manually`.
- **`yapexpr.arithmetic`**: `Number` is a float wrapper with `+` and `*`. Computing the same formula directly or through an expression tree gives the same result:
  - `eval_as_native` and `eval_as_native_4x` compute it directly.
  - `eval_as_expr` and `eval_as_expr_4x` compute it through an expression tree.

  `NaxpyTransform` fuses `a * x + y` into `naxpy`, and `eval_with_naxpy` uses it.