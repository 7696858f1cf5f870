# RFC 5114, section 2.1: 1024-bit MODP group with 160-bit prime order subgroup
RFC5114_P_HEX = """
B10B8F96A080E01DDE92DE5EAE5D54EC52C99FBCFB06A3C6
9A6A9DCA52D23B616073E28675A23D189838EF1E2EE652C0
13ECB4AEA906112324975C3CD49B83BFACCBDD7D90C4BD70
98488E9C219A73724EFFD6FAE5644738FAA31A4FF55BCCC0
A151AF5F0DC8B4BD45BF37DF365C1A65E68CFDA76D4DA708
DF1FB2BC2E4A4371
"""

RFC5114_ALPHA_HEX = """
A4D1CBD5C3FD34126765A442EFB99905F8104DD258AC507F
D6406CFF14266D31266FEA1E5C41564B777E690F5504F213
160217B4B01B886A5E91547F9E2749F4D7FBD7D3B9A92EE1
909D0D2263F80A76A6A24C087A091F531DBF0A0169B6A28A
D662A4D18E73AFA32D779D5918D08BC8858F4DCEF97C2A24
855E6EEB22B3B2E5
"""

RFC5114_Q_HEX = "F518AA8781A8DF278ABA4E7D64B7CB9D49462353"

# beta = alpha^e mod p
RFC5114_BETA_EXPONENT = 0x6C3A1F9D27B54E08

# RFC 2409, section 6.2: 1024-bit safe prime, q = (p - 1) / 2
OAKLEY2_P_HEX = """
FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1
29024E088A67CC74020BBEA63B139B22514A08798E3404DD
EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245
E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED
EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE65381
FFFFFFFFFFFFFFFF
"""

# squares of 2 and 3 generate the quadratic residues, the order q subgroup
OAKLEY2_ALPHA = 4
OAKLEY2_BETA = 9

TOY_P = 23
TOY_Q = 11
TOY_ALPHA = 4
TOY_BETA = 9

RFC5114_GROUP = "rfc5114-1024-160"
OAKLEY2_GROUP = "oakley2-1024"
TOY_GROUP = "toy"

GROUP_NAMES = (RFC5114_GROUP, OAKLEY2_GROUP, TOY_GROUP)
DEFAULT_GROUP = RFC5114_GROUP

EVALUATION_ITERATIONS = 50
EVALUATION_OUTPUT = "output/proof_results.csv"
