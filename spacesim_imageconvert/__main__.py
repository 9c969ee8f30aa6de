from .imageconvert import run

run()
