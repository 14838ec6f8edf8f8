"""
Rotating tesseract visualization.
"""
