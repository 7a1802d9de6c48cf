from os.path import dirname
from sys import path


# Add this project to the Python path.
path.append(dirname(dirname(__file__)))
