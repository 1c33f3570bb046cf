"""JCE (Tars) tagged writer and reader, and the protocol structures built on them."""