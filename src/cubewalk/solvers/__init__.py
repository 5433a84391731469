from cubewalk.solvers.walker import PathWalker, WalkerState, password
