"""Debug tracing for colorside.

A package-local icecream debugger so that enabling debug output here does
not touch the global ``icecream.ic`` of the host application.
"""

from icecream import IceCreamDebugger

ic = IceCreamDebugger(prefix="colorside| ")
ic.disable()
