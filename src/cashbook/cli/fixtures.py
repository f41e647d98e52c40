"""Sample data written when input files are missing."""

CHART_OF_ACCOUNTS_CSV = """10,0
3,345
2,234
1,123
4,0
"""

CASH_BOOK_CSV = """1,100
2,66
1,-500
3,55
1,-100
1,1377
4,-1
"""
