# ABOUTME: reddit-authors - batch harvester of Reddit post authors
# ABOUTME: Reads post URLs, fetches their about.json documents and writes author,url CSV reports

__version__ = "0.1.0"
