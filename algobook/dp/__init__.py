"""Dynamic programming: coins, subsets, grid paths, sequences, counting and optimisation."""