"""Cube folding and edge-crossing rules."""
from cubewalk.analysis.resolvers import CubeEdgeResolver, EdgeResolver, FlatEdgeResolver
from cubewalk.analysis.topology import CubeTopologyBuilder, Face, FaceRegistry
