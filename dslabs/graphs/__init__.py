"""Undirected graphs and the search for a vertex that leaves a tree."""