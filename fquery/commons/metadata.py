import importlib.metadata as mdata

__VERSION__ = mdata.version("fquery")
__DESCRIPTION__ = mdata.metadata("fquery")["Summary"]
