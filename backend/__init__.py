"""
Host stand-in for pattern scripts: LX shims, parameters, preview engine
"""
