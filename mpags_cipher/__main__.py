from mpags_cipher.cli import main

main(prog_name="mpags-cipher")
