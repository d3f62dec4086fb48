from mypyc.build import mypycify
from setuptools import setup

setup(
    # mypyc docs say to just set packages simply like this:
    #   packages=['dualnum'],
    #
    # However: When I do that, dualnum/__init__.py *itself* is included in the wheel which we don't want,
    #   because then the python version will be used instead of the mypyc-compiled pyd version.
    packages=["dualnum-stubs"],
    include_package_data=True,
    package_data={'dualnum-stubs': ["*.pyi"]},

    # mypyc cannot compile a @runtime_checkable Protocol (the compiled class is not
    # recognized as a protocol at import), so algebra ships as plain Python.
    py_modules=["dualnum.algebra"],

    ext_modules=mypycify([
        "dualnum/__init__.py",
        "dualnum/dual.py",
        "dualnum/utils.py",
    ]),
)
