"""
Access log report: aggregate web-server access logs into Markdown/AsciiDoc reports
"""

VERSION = '1.0.0'
