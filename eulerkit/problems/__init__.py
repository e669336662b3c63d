"""Solutions to Project Euler problems 1 to 10 and 16 to 31."""