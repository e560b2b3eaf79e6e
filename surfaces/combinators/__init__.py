"""
Combinators for surfaces

Build new surfaces out of existing ones.

Key Components
--------------
Transform Combinators : Remap the query point (rotate, translate, scale,
                        invert, flip) or the value (mul, add)
Parallel Evaluation   : Sample several surfaces at one point (evaluate)
Composition           : Chain functions left-to-right (compose)

Examples
--------
>>> from surfaces.combinators import rotate, scale, evaluate, compose
>>> from surfaces.fields import checker, rings
>>>
>>> tilted = rotate(scale(checker(), (2, 1)), 30)
>>> mixed = evaluate(max, tilted, rings(3))
>>> shaded = compose(mixed, lambda v: 0.25 + 0.5 * v)
"""

from .transforms import (
    Rotate,
    Translate,
    Scale,
    Invert,
    Flip,
    Mul,
    Add,
    rotate,
    translate,
    scale,
    invert,
    flip,
    mul,
    add,
)

from .composition import (
    Evaluate,
    evaluate,
    compose,
    identity,
)

__all__ = [
    # Transform types
    'Rotate',
    'Translate',
    'Scale',
    'Invert',
    'Flip',
    'Mul',
    'Add',

    # Transform combinators
    'rotate',
    'translate',
    'scale',
    'invert',
    'flip',
    'mul',
    'add',

    # Composition
    'Evaluate',
    'evaluate',
    'compose',
    'identity',
]
