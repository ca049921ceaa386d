from kubelens.cli import entrypoint

entrypoint()
