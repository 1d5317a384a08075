records_grammar = r"""
    records: (_NEWLINE | record _NEWLINE)* record?
    record: amount [min_length [max_length]]
    amount: INT
    min_length: INT
    max_length: INT

    COMMENT: /#[^\n]*/
    _NEWLINE: /\r?\n/

    %import common.INT
    %import common.WS_INLINE
    %ignore WS_INLINE
    %ignore COMMENT
"""
