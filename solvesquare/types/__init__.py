"""Value types shared by the solvers and the command-line driver."""
