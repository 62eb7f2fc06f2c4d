"""Nim, Chomp, Domineering, Reversi, Sprouts, Order and Chaos, Tic Tac Toe and Zener, with a registry."""